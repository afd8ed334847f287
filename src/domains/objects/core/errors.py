"""Errors raised while framing and hashing version-control objects."""

from __future__ import annotations


class ObjectHashError(Exception):
    """Base class for object hashing failures."""


class UnsupportedAlgorithm(ObjectHashError):
    """Raised when the requested digest algorithm is not available."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"unsupported digest algorithm: {algorithm!r}")
        self.algorithm = algorithm


class EncodingError(ObjectHashError):
    """Raised when content or a type tag cannot be represented as bytes."""
