"""Value coercion for property strings."""

from __future__ import annotations

import re
from typing import Optional

from .errors import InvalidFormat

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_bool(raw: Optional[str], default: bool = False) -> bool:
    """Permissive boolean: only "true" (any case) is true, anything else false."""
    if raw is None:
        return default
    return raw.lower() == "true"


def parse_int(key: str, raw: Optional[str], default: int) -> int:
    """Strict integer parsing; malformed text raises InvalidFormat."""
    if raw is None:
        return default
    if not _INTEGER.fullmatch(raw):
        raise InvalidFormat(key, raw)
    return int(raw)
