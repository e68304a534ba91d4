"""
Usage text rendered from the parameter registry.

The same declarations that drive validation produce the help output, so
the two cannot drift apart. Rendering is pure: it depends only on the
registry, never on the property set being validated.

Empty cases are not errors: a registry without required keys yields a
usage line without placeholders, and one without declarations yields an
empty properties section.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .registry import Registry

DEFAULT_PROGRAM = "retrolambda"

BANNER = (
    "Retrolambda takes Java 8 classes and backports lambda expressions and\n"
    "some other language features to work on Java 7, 6 or 5.\n"
    "Web site: https://github.com/luontola/retrolambda\n"
    "\n"
    "Copyright (c) 2013-2017  Esko Luontola and other Retrolambda contributors\n"
    "This software is released under the Apache License 2.0.\n"
    "The license text is at http://www.apache.org/licenses/LICENSE-2.0\n"
)

TRAILING_NOTE = (
    "If the Java agent is used, then Retrolambda will use it to capture the\n"
    "lambda classes generated by Java. Otherwise Retrolambda will hook into\n"
    "Java's internal lambda dumping API, which is more susceptible to suddenly\n"
    "stopping to work between Java releases.\n"
)


def format_parameter_help(key: str, tag: str, lines: Iterable[str]) -> str:
    """Format one property block: the key line and its indented description."""
    suffix = f" ({tag})" if tag else ""
    block = f"  {key}{suffix}\n"
    for line in lines:
        block += f"      {line}\n"
    return block


def render_usage_line(registry: "Registry", program: str = DEFAULT_PROGRAM) -> str:
    options = " ".join(f"-D{key}=?" for key in registry.required_keys)
    if not options:
        return f"Usage: {program}\n"
    return f"Usage: {program} {options}\n"


def render_help(registry: "Registry", program: str = DEFAULT_PROGRAM) -> str:
    """
    Render the full usage text.

    Args:
        registry: Declarations to describe
        program: Program name shown on the usage line

    Returns:
        Usage line, banner, one block per declared property in declaration
        order, and the trailing note.
    """
    properties_help = "\n".join(registry.help_blocks)
    return (
        render_usage_line(registry, program)
        + "\n"
        + BANNER
        + "\n"
        + "Configurable system properties:\n"
        + "\n"
        + properties_help
        + "\n"
        + TRAILING_NOTE
    )
