"""Objects domain core -- pure functions for framing and hashing stored objects."""

from __future__ import annotations

from src.domains.objects.core.errors import EncodingError, ObjectHashError, UnsupportedAlgorithm
from src.domains.objects.core.framing import (
    BLOB,
    OBJECT_TYPES,
    build_header,
    frame_object,
    parse_header,
)
from src.domains.objects.core.object_id import (
    DEFAULT_ALGORITHM,
    compute_digest,
    digest_to_hex,
    encode_text,
    hash_blob,
    hash_text,
)

__all__ = [
    # errors
    "EncodingError",
    "ObjectHashError",
    "UnsupportedAlgorithm",
    # framing
    "BLOB",
    "OBJECT_TYPES",
    "build_header",
    "frame_object",
    "parse_header",
    # object_id
    "DEFAULT_ALGORITHM",
    "compute_digest",
    "digest_to_hex",
    "encode_text",
    "hash_blob",
    "hash_text",
]
