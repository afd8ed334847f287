"""CLI command implementations for the blob object ID hasher."""

from __future__ import annotations

import sys

import click
import structlog
from pydantic import ValidationError

from src.domains.objects.core.errors import ObjectHashError
from src.domains.objects.core.framing import BLOB
from src.models.config import Config
from src.services.blob_hasher import BlobHasher
from src.utils.logger import configure_logging

logger = structlog.get_logger(__name__)

LITERAL_CONTENT = "foobar\n"


def _get_config() -> Config:
    """Load configuration from environment and .env file."""
    return Config()


@click.command()
def hash_literal_blob() -> None:
    """Print the object ID of the fixed "foobar\\n" blob."""
    try:
        config = _get_config()
    except ValidationError as exc:
        click.echo(f"[ERROR] Invalid configuration: {exc}", err=True)
        sys.exit(2)
    configure_logging(config.log_level)

    try:
        hashed = BlobHasher().hash_text(LITERAL_CONTENT, object_type=BLOB)
    except ObjectHashError as exc:
        logger.error("hash_failed", error_type=type(exc).__name__, error=str(exc))
        click.echo(f"[ERROR] {exc}", err=True)
        sys.exit(1)

    logger.info("hash_complete", object_type=hashed.object_type, size=hashed.size)
    click.echo(hashed.object_id)
