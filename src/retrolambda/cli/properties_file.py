"""
Loading property sets from ``.properties``-style files.

Supports the subset build tools write: ``key=value`` or ``key: value``
lines, ``#`` and ``!`` comment lines, blank lines. No escapes and no line
continuations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import typer

from retrolambda.core.config.errors import IOFailure


def parse_properties(lines: Iterable[str]) -> Dict[str, str]:
    properties: Dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line[0] in "#!":
            continue
        positions = [pos for pos in (line.find("="), line.find(":")) if pos >= 0]
        if not positions:
            # a bare key has an empty value
            properties[line] = ""
            continue
        split_at = min(positions)
        properties[line[:split_at].strip()] = line[split_at + 1 :].strip()
    return properties


def load_properties_file(path: Union[str, Path]) -> Dict[str, str]:
    """
    Read a UTF-8 properties file.

    Raises:
        IOFailure: If the file cannot be read
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IOFailure(path, exc) from exc
    return parse_properties(text.splitlines())


def parse_definitions(definitions: Optional[List[str]]) -> Dict[str, str]:
    """Parse repeated ``KEY=VALUE`` command-line definitions."""
    parsed: Dict[str, str] = {}
    if not definitions:
        return parsed
    for raw in definitions:
        # -Dkey without a value defines an empty string, as the JVM does
        key, _, value = raw.partition("=")
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"Invalid definition '{raw}'. Key is empty.")
        parsed[key] = value
    return parsed
