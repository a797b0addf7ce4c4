"""Application configuration.

- Environment variables and `.env` files are read through pydantic-settings,
  so the CLI and the adapters share one validated contract.
- A per-user `.env` lets the API key live outside the project directory.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "eurostar-checker"
DEFAULT_BASE_URL = "https://api.prod.eurostar.com/bpa"


def get_user_env_file() -> Path:
    return Path(typer.get_app_dir(APP_NAME)) / ".env"


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Set variables in the user's `.env`, keeping whatever else it holds."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in values.items():
        set_key(env_path, key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Central settings for the CLI and the Eurostar adapters."""

    model_config = SettingsConfigDict(
        env_prefix="EUROSTAR_CHECKER_",
        extra="ignore",
        case_sensitive=False,
        # Project `.env` first, then the user's global one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="Eurostar API key, sent as the `x-apikey` header.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL of the Eurostar booking API.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default=f"{APP_NAME}/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    max_retries: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Retries for 5xx responses and connection failures (0 disables retrying).",
    )
    retry_backoff_seconds: float = Field(
        default=1.25,
        ge=0,
        description="Base delay of the exponential backoff between retries.",
    )
    retry_jitter_seconds: float = Field(
        default=0.35,
        ge=0,
        description="Upper bound of the random jitter added to each backoff delay.",
    )

    max_concurrency: int | None = Field(
        default=None,
        ge=1,
        le=500,
        description="Cap on concurrent date pair queries (unset means one task per pair).",
    )
    batch_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Upper bound for a whole batch of date pair queries (seconds).",
    )

    default_adults: int = Field(
        default=1,
        ge=1,
        le=9,
        description="Party size used when --adults is not given.",
    )
