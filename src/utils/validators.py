"""Object ID and type tag validation utilities."""

from __future__ import annotations

import re

OBJECT_ID_HEX_LENGTHS: dict[str, int] = {
    "sha1": 40,
    "sha256": 64,
}


def is_valid_object_id(value: str, algorithm: str = "sha1") -> bool:
    """Check if a string is a full lowercase hex object ID for ``algorithm``."""
    length = OBJECT_ID_HEX_LENGTHS.get(algorithm)
    if length is None:
        return False
    return bool(re.fullmatch(rf"[0-9a-f]{{{length}}}", value))


def is_valid_object_type(value: str) -> bool:
    """Check if a type tag can be written into an object header."""
    return bool(re.fullmatch(r"[\x21-\x7e]+", value))


def abbreviate_object_id(object_id: str, length: int = 7) -> str:
    """Shorten an object ID for log output."""
    return object_id[: max(length, 4)]
