"""Blob hashing service producing HashedObject records."""

from __future__ import annotations

import structlog

from src.domains.objects.core.errors import EncodingError
from src.domains.objects.core.framing import BLOB
from src.domains.objects.core.object_id import (
    DEFAULT_ALGORITHM,
    compute_digest,
    encode_text,
    hash_blob,
)
from src.models.hashed_object import HashedObject
from src.utils.validators import abbreviate_object_id

logger = structlog.get_logger(__name__)


class BlobHasher:
    """Computes object IDs and wraps them with the header they were framed with."""

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        # raises UnsupportedAlgorithm here, not on first hash
        compute_digest(b"", algorithm)
        self.algorithm = algorithm

    def hash(self, content: bytes, object_type: str = BLOB) -> HashedObject:
        """Hash ``content`` as an object of ``object_type``."""
        object_id = hash_blob(object_type, content, self.algorithm)
        logger.debug(
            "hashed_object",
            object_type=object_type,
            size=len(content),
            algorithm=self.algorithm,
            object_id=abbreviate_object_id(object_id),
        )
        return HashedObject(
            object_type=object_type,
            size=len(content),
            algorithm=self.algorithm,
            object_id=object_id,
        )

    def hash_text(self, text: str, object_type: str = BLOB, encoding: str = "utf-8") -> HashedObject:
        """Encode ``text`` with ``encoding`` and hash the resulting bytes."""
        try:
            content = encode_text(text, encoding)
        except EncodingError as exc:
            logger.warning("text_encoding_failed", encoding=encoding, error=str(exc))
            raise
        return self.hash(content, object_type)
