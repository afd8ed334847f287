"""Object framing: the ``"<type> <size>\\0"`` header placed ahead of content."""

from __future__ import annotations

from src.domains.objects.core.errors import EncodingError, ObjectHashError

BLOB = "blob"
OBJECT_TYPES: tuple[str, ...] = ("blob", "tree", "commit", "tag")

_SEPARATOR = b" "
_TERMINATOR = b"\0"


def _encode_object_type(object_type: str) -> bytes:
    """Encode a type tag as ASCII, rejecting anything that would break the header."""
    try:
        encoded = object_type.encode("ascii")
    except UnicodeEncodeError as exc:
        msg = f"object type must be ASCII: {object_type!r}"
        raise EncodingError(msg) from exc
    if not encoded or _SEPARATOR in encoded or _TERMINATOR in encoded:
        msg = f"object type must be a non-empty token without spaces or NUL: {object_type!r}"
        raise EncodingError(msg)
    return encoded


def build_header(object_type: str, size: int) -> bytes:
    """Build the object header for ``size`` bytes of content.

    The size is written as ASCII decimal digits followed by a single NUL.
    """
    if size < 0:
        msg = f"size must not be negative: {size}"
        raise ValueError(msg)
    return _encode_object_type(object_type) + _SEPARATOR + str(size).encode("ascii") + _TERMINATOR


def frame_object(object_type: str, content: bytes) -> bytes:
    """Prefix ``content`` with its object header.

    The length in the header is the byte count of ``content``; ``str`` input
    is rejected because its character count can differ from its byte count.
    """
    if isinstance(content, str):
        msg = "content must be bytes; encode text before framing"
        raise EncodingError(msg)
    return build_header(object_type, len(content)) + bytes(content)


def parse_header(framed: bytes) -> tuple[str, int, bytes]:
    """Split a framed buffer into ``(object_type, declared_size, content)``.

    Only the first NUL ends the header, so content may itself contain NULs.
    """
    header, terminator, content = framed.partition(_TERMINATOR)
    if not terminator:
        msg = "framed object has no header terminator"
        raise ObjectHashError(msg)

    object_type, separator, size_text = header.partition(_SEPARATOR)
    if not separator or not object_type or not size_text.isdigit() or (
        size_text.startswith(b"0") and len(size_text) > 1
    ):
        msg = f"malformed object header: {header!r}"
        raise ObjectHashError(msg)

    size = int(size_text)
    if size != len(content):
        msg = f"declared size {size} does not match content length {len(content)}"
        raise ObjectHashError(msg)

    try:
        decoded_type = object_type.decode("ascii")
    except UnicodeDecodeError as exc:
        msg = f"object type is not ASCII: {object_type!r}"
        raise EncodingError(msg) from exc
    return decoded_type, size, content
