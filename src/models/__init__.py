"""Pydantic data models for the blob object ID hasher."""

from src.models.config import Config
from src.models.hashed_object import HashedObject

__all__ = [
    "Config",
    "HashedObject",
]
