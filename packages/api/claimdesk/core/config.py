# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with local dev defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Repository root .env, independent of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[4]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "claimdesk"
    DEBUG: bool = False

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000"]

    # -- Validation --
    LOG_VALIDATION_DETAILS: bool = Field(
        default=False,
        description="Log the missing-document and issue lists for every validation, "
        "not just their counts.",
    )


settings = Settings()
