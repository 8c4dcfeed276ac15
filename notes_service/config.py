"""
Notes Service — Application Configuration
===========================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe loading from environment variables, a .env file, or the
       command line (see cli.py), validated once at construction.
How:   Pydantic Settings reads NOTES_* environment variables, validates
       types/ranges, and provides a default `settings` object.
Who:   Imported by main.py (app factory) and cli.py (process entry point).
When:  Loaded at module import time; the CLI builds its own instance from
       the required --host/--port/--cache arguments.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# What: The upload form that ships inside the package
PACKAGED_UPLOAD_FORM = Path(__file__).resolve().parent / "static" / "UploadForm.html"


class Settings(BaseSettings):
    """
    Application settings.

    Attributes are grouped by concern for readability.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="127.0.0.1", description="Listen host")
    port: int = Field(default=8000, ge=1, le=65535, description="Listen port")

    # ── Note Storage ──────────────────────────────────────────────────────
    # What: Directory holding one <name>.txt file per note
    # Created on startup (with intermediate directories) if absent
    cache_dir: str = Field(default="./cache", description="Notes storage directory")

    # What: HTML form served at /UploadForm.html
    # Why optional: Defaults to the packaged asset; deployments may brand their own
    upload_form_path: Optional[str] = Field(default=None)

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("cache_dir")
    @classmethod
    def validate_cache_dir(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cache_dir must not be empty")
        return v

    @property
    def storage_path(self) -> Path:
        """Absolute path of the notes storage directory."""
        return Path(self.cache_dir).expanduser().resolve()

    @property
    def upload_form(self) -> Path:
        """Path of the HTML upload form (override or packaged default)."""
        if self.upload_form_path:
            return Path(self.upload_form_path).expanduser().resolve()
        return PACKAGED_UPLOAD_FORM

    # ── Pydantic Settings Config ──────────────────────────────────────────
    # Why env_prefix: HOST and PORT are too generic to read unprefixed
    model_config = {
        "env_prefix": "NOTES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Default instance, used when create_app() is called without explicit settings
settings = Settings()
