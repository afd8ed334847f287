"""Shared test fixtures for the blob object ID hasher."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def foobar_content() -> bytes:
    """The fixed literal hashed by the CLI."""
    return b"foobar\n"


@pytest.fixture
def foobar_object_id() -> str:
    """Object ID reported by ``echo foobar | git hash-object --stdin``."""
    return "323fae03f4606ea9991df8befbb2fca795e648fa"


@pytest.fixture
def empty_blob_object_id() -> str:
    """Object ID of the empty blob."""
    return "e69de29bb2d1d6434b8b29ae775ad8c2e48c5391"


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables that would leak in from the environment."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults so one test's logging setup does not leak into the next."""
    yield
    structlog.reset_defaults()
