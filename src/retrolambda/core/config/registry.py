"""Parameter registry: the declared properties and their classification."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Dict, List, Mapping, Optional, Tuple

from retrolambda import api

from .help import format_parameter_help

PropertySet = Mapping[str, Optional[str]]


class ParameterKind(Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    ALTERNATIVE = "alternative"


@dataclass(frozen=True)
class ParameterDeclaration:
    """One declared property and its help text."""

    key: str
    kind: ParameterKind
    help_lines: Tuple[str, ...] = ()
    replaces: Optional[str] = None  # only for ALTERNATIVE

    @property
    def tag(self) -> str:
        if self.kind is ParameterKind.OPTIONAL:
            return ""
        return self.kind.value

    @property
    def help_block(self) -> str:
        return format_parameter_help(self.key, self.tag, self.help_lines)


@dataclass(frozen=True)
class Registry:
    """
    Immutable catalog of parameter declarations.

    Declaration order is significant: it is the order of the usage line
    and of the per-property help blocks. Keys are expected to be unique and
    every alternative's target to be declared; neither is enforced here.
    """

    declarations: Tuple[ParameterDeclaration, ...] = ()

    @property
    def required_keys(self) -> List[str]:
        return [d.key for d in self.declarations if d.kind is ParameterKind.REQUIRED]

    @property
    def alternatives(self) -> Dict[str, str]:
        """Alternative key -> the key it can stand in for, in registration order."""
        return {
            d.key: d.replaces
            for d in self.declarations
            if d.kind is ParameterKind.ALTERNATIVE and d.replaces is not None
        }

    @property
    def help_blocks(self) -> List[str]:
        return [d.help_block for d in self.declarations]

    def keys(self) -> List[str]:
        return [d.key for d in self.declarations]

    def get(self, key: str) -> Optional[ParameterDeclaration]:
        for declaration in self.declarations:
            if declaration.key == key:
                return declaration
        return None

    def alternatives_for(self, key: str) -> List[str]:
        return [alt for alt, target in self.alternatives.items() if target == key]

    def is_satisfied(self, properties: PropertySet, key: str) -> bool:
        """True if ``key`` or any of its alternatives has a value."""
        if properties.get(key) is not None:
            return True
        return any(properties.get(alt) is not None for alt in self.alternatives_for(key))


@dataclass
class RegistryBuilder:
    """
    Collects declarations during start-up and produces a Registry.

    Declaring the same key twice records it twice; callers register each
    key once.
    """

    _declarations: List[ParameterDeclaration] = field(
        default_factory=list, init=False, repr=False
    )
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def _add(self, declaration: ParameterDeclaration) -> "RegistryBuilder":
        with self._lock:
            self._declarations.append(declaration)
        return self

    def declare_required(self, key: str, *lines: str) -> "RegistryBuilder":
        return self._add(ParameterDeclaration(key, ParameterKind.REQUIRED, tuple(lines)))

    def declare_optional(self, key: str, *lines: str) -> "RegistryBuilder":
        return self._add(ParameterDeclaration(key, ParameterKind.OPTIONAL, tuple(lines)))

    def declare_alternative(
        self, key: str, replaces: str, *lines: str
    ) -> "RegistryBuilder":
        return self._add(
            ParameterDeclaration(key, ParameterKind.ALTERNATIVE, tuple(lines), replaces)
        )

    def build(self) -> Registry:
        with self._lock:
            return Registry(tuple(self._declarations))


def build_registry() -> Registry:
    """Declare the Retrolambda system properties."""
    builder = RegistryBuilder()

    builder.declare_optional(
        api.BYTECODE_VERSION,
        "Major version number for the generated bytecode. For a list, see",
        "offset 7 at http://en.wikipedia.org/wiki/Java_class_file#General_layout",
        f"Default value is {api.JAVA_7_BYTECODE_VERSION} (i.e. Java 7)",
    )
    builder.declare_optional(
        api.DEFAULT_METHODS,
        "Whether to backport default methods and static methods on interfaces.",
        "LIMITATIONS: All backported interfaces and all classes which implement",
        "them or call their static methods must be backported together,",
        "with one execution of Retrolambda.",
        'Disabled by default. Enable by setting to "true"',
    )
    builder.declare_required(
        api.INPUT_DIR,
        "Input directory from where the original class files are read.",
    )
    builder.declare_optional(
        api.OUTPUT_DIR,
        "Output directory into where the generated class files are written.",
        f"Defaults to same as {api.INPUT_DIR}",
    )
    builder.declare_required(
        api.CLASSPATH,
        "Classpath containing the original class files and their dependencies.",
        "Uses ; or : as the path separator, see os.pathsep",
    )
    builder.declare_alternative(
        api.CLASSPATH_FILE,
        api.CLASSPATH,
        "File listing the classpath entries.",
        f"Alternative to {api.CLASSPATH} for avoiding the command line",
        "length limit. The file must list one file per line with UTF-8 encoding.",
    )
    builder.declare_optional(
        api.INCLUDED_FILES,
        "List of files to process, instead of processing all files.",
        "This is useful for a build tool to support incremental compilation.",
        "Uses ; or : as the path separator, see os.pathsep",
    )
    builder.declare_alternative(
        api.INCLUDED_FILES_FILE,
        api.INCLUDED_FILES,
        "File listing the files to process, instead of processing all files.",
        f"Alternative to {api.INCLUDED_FILES} for avoiding the command line",
        "length limit. The file must list one file per line with UTF-8 encoding.",
    )
    builder.declare_optional(
        api.JAVAC_HACKS,
        "Attempts to fix javac bugs (type-annotation emission for local variables).",
        'Disabled by default. Enable by setting to "true"',
    )
    builder.declare_optional(
        api.QUIET,
        "Reduces the amount of logging.",
        'Disabled by default. Enable by setting to "true"',
    )
    return builder.build()


@lru_cache(maxsize=1)
def get_default_registry() -> Registry:
    """Process-wide registry, built on first use."""
    return build_registry()
