"""Settings for the bookshelf service, read from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_PORT = "3000"


@dataclass(frozen=True)
class Configuration:
    """Values the service is started with."""

    port: str
    database_url: str


def get_env_or_default(key: str, default: str) -> str:
    """Return the environment variable ``key``, or ``default`` when it is unset."""
    return os.environ.get(key, default)


def new_configuration() -> Configuration:
    """Read the configuration from the environment, warning when no database is set."""
    database_url = get_env_or_default("DATABASE_URL", "")
    if not database_url:
        logger.warning("DATABASE_URL is not set")
    return Configuration(
        port=get_env_or_default("PORT", DEFAULT_PORT),
        database_url=database_url,
    )