"""
Application settings.

Values come from environment variables (a ``.env`` file in the working
directory is loaded first) and fall back to the defaults below.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()


class Settings(BaseModel):
    """Circulation settings."""

    max_books: int = Field(
        default=3,
        ge=1,
        description="Maximum number of books a user may hold at once",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Optional file to mirror log output to",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()


def load_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        max_books=int(os.environ.get("SHELFWISE_MAX_BOOKS", "3")),
        log_level=os.environ.get("SHELFWISE_LOG_LEVEL", "INFO"),
        log_file=os.environ.get("SHELFWISE_LOG_FILE") or None,
    )


settings = load_settings()
