"""Contract tests for the blob hashing service.

Verifies the service returns well-formed HashedObject records and logs
through structlog.
"""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from src.domains.objects.core.errors import EncodingError, UnsupportedAlgorithm
from src.models.hashed_object import HashedObject
from src.services.blob_hasher import BlobHasher
from src.utils.validators import is_valid_object_id


class TestBlobHasher:
    def test_hash_returns_hashed_object(self, foobar_content: bytes, foobar_object_id: str) -> None:
        hashed = BlobHasher().hash(foobar_content)
        assert isinstance(hashed, HashedObject)
        assert hashed.object_type == "blob"
        assert hashed.size == 7
        assert hashed.algorithm == "sha1"
        assert hashed.object_id == foobar_object_id

    def test_hash_text(self, foobar_object_id: str) -> None:
        assert BlobHasher().hash_text("foobar\n").object_id == foobar_object_id

    def test_hash_text_size_is_byte_count(self) -> None:
        assert BlobHasher().hash_text("ü").size == 2

    def test_hash_text_encoding_error(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(EncodingError):
                BlobHasher().hash_text("ü", encoding="ascii")
        assert any(entry["event"] == "text_encoding_failed" for entry in logs)

    def test_object_type_passed_through(self, foobar_content: bytes) -> None:
        hashed = BlobHasher().hash(foobar_content, object_type="tree")
        assert hashed.object_type == "tree"
        assert hashed.object_id != BlobHasher().hash(foobar_content).object_id

    def test_empty_blob(self, empty_blob_object_id: str) -> None:
        hashed = BlobHasher().hash(b"")
        assert hashed.size == 0
        assert hashed.object_id == empty_blob_object_id

    def test_object_id_is_valid(self) -> None:
        for content in (b"", b"\x00", b"foobar\n", bytes(range(256))):
            assert is_valid_object_id(BlobHasher().hash(content).object_id)

    def test_sha256(self, foobar_content: bytes) -> None:
        hashed = BlobHasher(algorithm="sha256").hash(foobar_content)
        assert hashed.algorithm == "sha256"
        assert is_valid_object_id(hashed.object_id, algorithm="sha256")

    def test_unsupported_algorithm_fails_at_construction(self) -> None:
        with pytest.raises(UnsupportedAlgorithm):
            BlobHasher(algorithm="no-such-digest")

    def test_logs_hashed_object(self, foobar_content: bytes) -> None:
        with capture_logs() as logs:
            BlobHasher().hash(foobar_content)
        assert logs == [
            {
                "event": "hashed_object",
                "log_level": "debug",
                "object_type": "blob",
                "size": 7,
                "algorithm": "sha1",
                "object_id": "323fae0",
            }
        ]
