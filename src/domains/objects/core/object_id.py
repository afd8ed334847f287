"""Object identifiers: digests of framed content rendered as hex."""

from __future__ import annotations

import hashlib

from src.domains.objects.core.errors import EncodingError, UnsupportedAlgorithm
from src.domains.objects.core.framing import BLOB, frame_object

DEFAULT_ALGORITHM = "sha1"


def compute_digest(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Return the raw digest of ``data``."""
    try:
        hasher = hashlib.new(algorithm)
    except (ValueError, TypeError) as exc:
        raise UnsupportedAlgorithm(algorithm) from exc
    hasher.update(data)
    # shake_* digests need an explicit length and are not usable as object IDs
    if hasher.digest_size == 0:
        raise UnsupportedAlgorithm(algorithm)
    return hasher.digest()


def digest_to_hex(digest: bytes) -> str:
    """Render each digest byte as two lowercase hex digits.

    Leading zero bytes are kept, so a SHA-1 digest always gives 40 characters.
    """
    return "".join(f"{byte:02x}" for byte in digest)


def hash_blob(object_type: str, content: bytes, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Compute the object ID of ``content`` stored as ``object_type``.

    For ``hash_blob("blob", b"foobar\\n")`` this matches
    ``git hash-object``: ``323fae03f4606ea9991df8befbb2fca795e648fa``.
    """
    return digest_to_hex(compute_digest(frame_object(object_type, content), algorithm))


def encode_text(text: str, encoding: str = "utf-8") -> bytes:
    """Encode ``text`` for hashing, raising EncodingError if it is not representable."""
    try:
        return text.encode(encoding)
    except (UnicodeEncodeError, LookupError) as exc:
        msg = f"text cannot be encoded as {encoding}: {exc}"
        raise EncodingError(msg) from exc


def hash_text(
    text: str,
    object_type: str = BLOB,
    encoding: str = "utf-8",
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Encode ``text`` and compute its object ID."""
    return hash_blob(object_type, encode_text(text, encoding), algorithm)
