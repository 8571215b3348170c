"""UserHub configuration.

Values come from OS environment variables first and then from a single
env file. The env file is picked in this order:

- the path in ``USERHUB_ENV_FILE`` (relative to the project root if not absolute)
- ``config/.env.dev`` for local development
- ``config/.env`` for deployments
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "USERHUB_ENV_FILE"


def _find_project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir():
            return candidate
        if (candidate / "pyproject.toml").is_file():
            return candidate
    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Directory that holds the ``.env`` files."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    for name in (".env.dev", ".env"):
        candidate = get_config_dir() / name
        if candidate.exists():
            return candidate

    return None


class Settings(BaseSettings):
    """Runtime configuration for the API, the CLI and the database."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "UserHub"
    debug: bool = False

    # Any async SQLAlchemy URL (sqlite+aiosqlite, postgresql+asyncpg)
    database_url: str = "sqlite+aiosqlite:///./data/userhub.db"
    database_echo: bool = False

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # comma separated; empty disables CORS

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: Any) -> str:
        if isinstance(value, list):
            return ",".join(value)
        return str(value) if value else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """``api_cors_origins`` split into a list of origins."""
        return [
            origin.strip()
            for origin in self.api_cors_origins.split(",")
            if origin.strip()
        ]


@lru_cache()
def get_settings() -> Settings:
    """Settings loaded once per process."""
    return Settings()


def clear_settings_cache() -> None:
    """Forget cached settings so the next call reloads them."""
    get_settings.cache_clear()
