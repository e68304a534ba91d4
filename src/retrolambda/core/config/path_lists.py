"""Path list parsing for inline values and list files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Union

from retrolambda.core.utils.logger import log_debug, log_file_operation

from .errors import IOFailure
from .registry import PropertySet


def parse_path_list(value: str, separator: str = os.pathsep) -> List[Path]:
    """Split an inline path list, dropping empty segments and keeping order."""
    return [Path(segment) for segment in value.split(separator) if segment]


def read_path_list(file: Union[str, Path]) -> List[Path]:
    """
    Read a list file: UTF-8, one path per line, empty lines ignored.

    Raises:
        IOFailure: If the file cannot be read or is not valid UTF-8
    """
    file = Path(file)
    try:
        # newline=None folds \r\n and \r into \n
        with file.open("r", encoding="utf-8", newline=None) as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise IOFailure(file, exc) from exc
    log_file_operation("read", str(file), True)
    return [Path(line) for line in text.split("\n") if line]


def resolve_path_list(
    properties: PropertySet,
    key: str,
    file_key: str,
    separator: str = os.pathsep,
) -> Optional[List[Path]]:
    """
    Resolve a setting that accepts an inline list or a list file.

    The inline value always wins. The file is read only when the inline
    value is absent. Returns None when neither is set.
    """
    inline = properties.get(key)
    if inline is not None:
        return parse_path_list(inline, separator)
    list_file = properties.get(file_key)
    if list_file is not None:
        log_debug("config", f"Reading {key} from {list_file}")
        return read_path_list(list_file)
    return None
