"""CLI entry point for the blob object ID hasher."""

from __future__ import annotations

from src.cli.commands import hash_literal_blob

cli = hash_literal_blob
