"""
Pydantic models for polyglot_ast configuration.

Uses pydantic-settings for environment variable validation and type coercion.
"""

from __future__ import annotations

import codecs

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["PolyglotSettings"]


class PolyglotSettings(BaseSettings):
    """
    Settings for tree construction.

    Usage:
        settings = PolyglotSettings()
        print(settings.max_depth)
    """

    model_config = SettingsConfigDict(env_prefix="POLYGLOT_", env_file=".env", extra="ignore")

    # Recursion guards
    max_depth: int = Field(default=32, ge=1)
    detect_cycles: bool = True

    # Encoding of source files and of bytes given to from_code; parsed as UTF-8
    encoding: str = "utf-8"

    # Logging
    log_level: str = "WARNING"

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings Python does not know about."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level
