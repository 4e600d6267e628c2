"""Configuration management for HexNote."""

import logging
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


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
        return default


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean."""
    value = os.getenv(key, "").lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    return default


# Logging
LOG_LEVEL = get_env("LOG_LEVEL", "INFO")

# API Server settings
HEXNOTE_API_KEY = get_env("HEXNOTE_API_KEY")
HEXNOTE_HOST = get_env("HEXNOTE_HOST", "127.0.0.1")
HEXNOTE_PORT = get_env_int("HEXNOTE_PORT", 8421)
HEXNOTE_CORS_ORIGINS = [
    origin.strip()
    for origin in (
        get_env("HEXNOTE_CORS_ORIGINS", "http://localhost:1420")
        or "http://localhost:1420"
    ).split(",")
    if origin.strip()
]


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure and return logger."""
    name = (level or LOG_LEVEL or "INFO").upper()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, name, logging.INFO),
    )
    return logging.getLogger("hexnote")
