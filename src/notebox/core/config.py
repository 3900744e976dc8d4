"""Configuration management for Notebox."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def get_env(key: str, default: str | None = None) -> str | None:
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def get_env_int(key: str, default: int) -> int:
    """Get environment variable as integer."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(
            "Invalid integer for %s=%r, falling back to default value %s",
            key,
            value,
            default,
        )
        return default


# Server settings
NOTEBOX_HOST = get_env("NOTEBOX_HOST", "0.0.0.0") or "0.0.0.0"
NOTEBOX_PORT = get_env_int("NOTEBOX_PORT", 8000)
NOTEBOX_CORS_ORIGINS = [
    origin.strip()
    for origin in (get_env("NOTEBOX_CORS_ORIGINS", "*") or "*").split(",")
    if origin.strip()
]

# Notes file
NOTES_CACHE_PATH = Path(
    get_env("NOTEBOX_CACHE", "./cache/notes.json") or "./cache/notes.json"
)

# Logging
LOG_LEVEL = get_env("LOG_LEVEL", "INFO") or "INFO"


def setup_logging() -> logging.Logger:
    """Configure and return logger."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    )
    return logging.getLogger(__name__)
