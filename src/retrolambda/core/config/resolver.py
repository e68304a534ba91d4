"""Typed settings resolved from a property set."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from retrolambda import api
from retrolambda.core.utils.logger import log_debug

from .coercion import parse_bool, parse_int
from .errors import MissingRequiredParameter
from .help import DEFAULT_PROGRAM, render_help
from .path_lists import resolve_path_list
from .registry import PropertySet, Registry, get_default_registry

# Returned by get_included_files() when every file is to be processed.
ALL_FILES = None


class Config(Protocol):
    """Settings consumed by the bytecode transformation."""

    def get_bytecode_version(self) -> int: ...

    def is_default_methods_enabled(self) -> bool: ...

    def get_input_dir(self) -> Path: ...

    def get_output_dir(self) -> Path: ...

    def get_classpath(self) -> List[Path]: ...

    def get_included_files(self) -> Optional[List[Path]]: ...

    def is_javac_hacks_enabled(self) -> bool: ...

    def is_quiet(self) -> bool: ...


@dataclass(frozen=True)
class ResolvedConfig:
    bytecode_version: int
    default_methods: bool
    input_dir: Path
    output_dir: Path
    classpath: List[Path]
    included_files: Optional[List[Path]]
    javac_hacks: bool
    quiet: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bytecode_version": self.bytecode_version,
            "default_methods": self.default_methods,
            "input_dir": str(self.input_dir),
            "output_dir": str(self.output_dir),
            "classpath": [str(p) for p in self.classpath],
            "included_files": (
                None
                if self.included_files is None
                else [str(p) for p in self.included_files]
            ),
            "javac_hacks": self.javac_hacks,
            "quiet": self.quiet,
        }


class PropertiesConfig:
    """
    Configuration backed by a mapping of property strings.

    Accessors are computed on every call and nothing is cached. Failures
    (MissingRequiredParameter, InvalidFormat, IOFailure) propagate to the
    caller unchanged; check is_fully_configured() first.
    """

    def __init__(
        self,
        properties: PropertySet,
        registry: Optional[Registry] = None,
        path_separator: str = os.pathsep,
    ):
        self._properties = properties
        self._registry = registry if registry is not None else get_default_registry()
        self._path_separator = path_separator

    @property
    def registry(self) -> Registry:
        return self._registry

    def is_fully_configured(self) -> bool:
        return all(
            self._registry.is_satisfied(self._properties, key)
            for key in self._registry.required_keys
        )

    def get_bytecode_version(self) -> int:
        return parse_int(
            api.BYTECODE_VERSION,
            self._properties.get(api.BYTECODE_VERSION),
            api.JAVA_7_BYTECODE_VERSION,
        )

    def is_default_methods_enabled(self) -> bool:
        return parse_bool(self._properties.get(api.DEFAULT_METHODS))

    def get_input_dir(self) -> Path:
        input_dir = self._properties.get(api.INPUT_DIR)
        if input_dir is None:
            raise MissingRequiredParameter(api.INPUT_DIR)
        return Path(input_dir)

    def get_output_dir(self) -> Path:
        output_dir = self._properties.get(api.OUTPUT_DIR)
        if output_dir is not None:
            return Path(output_dir)
        log_debug("config", f"{api.OUTPUT_DIR} not set, using {api.INPUT_DIR}")
        return self.get_input_dir()

    def get_classpath(self) -> List[Path]:
        classpath = resolve_path_list(
            self._properties, api.CLASSPATH, api.CLASSPATH_FILE, self._path_separator
        )
        if classpath is None:
            raise MissingRequiredParameter(api.CLASSPATH)
        return classpath

    def get_included_files(self) -> Optional[List[Path]]:
        files = resolve_path_list(
            self._properties,
            api.INCLUDED_FILES,
            api.INCLUDED_FILES_FILE,
            self._path_separator,
        )
        if files is None:
            return ALL_FILES
        return files

    def is_javac_hacks_enabled(self) -> bool:
        return parse_bool(self._properties.get(api.JAVAC_HACKS))

    def is_quiet(self) -> bool:
        return parse_bool(self._properties.get(api.QUIET))

    def get_help(self, program: str = DEFAULT_PROGRAM) -> str:
        return render_help(self._registry, program)

    def resolve(self) -> ResolvedConfig:
        """Resolve every setting once and return an immutable snapshot."""
        return ResolvedConfig(
            bytecode_version=self.get_bytecode_version(),
            default_methods=self.is_default_methods_enabled(),
            input_dir=self.get_input_dir(),
            output_dir=self.get_output_dir(),
            classpath=self.get_classpath(),
            included_files=self.get_included_files(),
            javac_hacks=self.is_javac_hacks_enabled(),
            quiet=self.is_quiet(),
        )
