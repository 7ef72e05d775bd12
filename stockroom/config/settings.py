"""Application settings for the stockroom tools.

Environment variables are loaded from a ``.env`` file using ``python-dotenv``
and exposed through a frozen Pydantic settings object.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# Load environment variables from a .env file if present
load_dotenv()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_DATA_FILE = "inventory.json"
DEFAULT_LOG_FILE = "logs/stockroom.log"
DEFAULT_JSON_INDENT = 2
DEFAULT_LOG_LEVEL = "DEBUG"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """Immutable settings object used across the application."""

    data_file: Path
    log_file: Path
    json_indent: int = Field(DEFAULT_JSON_INDENT, ge=0)
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = ConfigDict(frozen=True)


def _build_settings() -> Settings:
    """Construct the ``Settings`` instance based on environment variables."""

    data_file = os.getenv("STOCKROOM_DATA_FILE", DEFAULT_DATA_FILE)
    log_file = os.getenv("STOCKROOM_LOG_FILE", DEFAULT_LOG_FILE)

    raw_indent = os.getenv("STOCKROOM_JSON_INDENT", str(DEFAULT_JSON_INDENT))
    try:
        json_indent = int(raw_indent)
    except ValueError:
        raise RuntimeError(f"STOCKROOM_JSON_INDENT must be an integer, got {raw_indent!r}") from None
    if json_indent < 0:
        raise RuntimeError("STOCKROOM_JSON_INDENT must not be negative")

    log_level = os.getenv("STOCKROOM_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if log_level not in _LOG_LEVELS:
        raise RuntimeError(f"Unknown STOCKROOM_LOG_LEVEL {log_level!r}")

    return Settings(
        data_file=Path(data_file),
        log_file=Path(log_file),
        json_indent=json_indent,
        log_level=log_level,
    )


# Public settings instance
settings = _build_settings()
