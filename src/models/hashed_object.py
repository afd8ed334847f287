"""Hashed object model for computed object identifiers."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from src.utils.validators import OBJECT_ID_HEX_LENGTHS, is_valid_object_id, is_valid_object_type


class HashedObject(BaseModel):
    """An object ID together with the header fields it was computed from."""

    model_config = ConfigDict(strict=True, frozen=True)

    object_type: str
    size: int
    algorithm: str
    object_id: str

    @field_validator("object_type")
    @classmethod
    def validate_object_type(cls, value: str) -> str:
        """Object type must be a non-empty ASCII token without spaces or NUL."""
        if not is_valid_object_type(value):
            msg = "object_type must be a non-empty printable ASCII token"
            raise ValueError(msg)
        return value

    @field_validator("size")
    @classmethod
    def validate_size(cls, value: int) -> int:
        """Size must not be negative."""
        if value < 0:
            msg = "size must be greater than or equal to 0"
            raise ValueError(msg)
        return value

    @field_validator("object_id")
    @classmethod
    def validate_object_id(cls, value: str) -> str:
        """Object ID must be lowercase hex with a whole number of bytes."""
        if not re.fullmatch(r"(?:[0-9a-f]{2})+", value):
            msg = "object_id must be lowercase hex of even length"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def validate_object_id_length(self) -> HashedObject:
        """Object ID must have the full digest length of a known algorithm."""
        expected = OBJECT_ID_HEX_LENGTHS.get(self.algorithm)
        if expected is not None and not is_valid_object_id(self.object_id, self.algorithm):
            msg = f"object_id must be {expected} hex characters for {self.algorithm}"
            raise ValueError(msg)
        return self
