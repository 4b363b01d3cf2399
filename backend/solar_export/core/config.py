"""Export backend settings, read from `SOLAR_EXPORT_*` variables and `.env`."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from platformdirs import user_data_dir
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_data_dir() -> Path:
    """Return platform-specific directory for staged export files."""
    return Path(user_data_dir(appname="SolarExport", appauthor="SolarWatch")).resolve()


class Settings(BaseSettings):
    """Where exports are staged, how they are named and how the service logs."""

    app_name: str = "Solar Export Backend"
    env: Literal["development", "production", "test"] = "development"
    api_prefix: str = "/api"
    data_dir: Path = Field(default_factory=_default_data_dir)
    log_level: str = "INFO"
    default_filename: str = "export"

    model_config = SettingsConfigDict(
        env_prefix="SOLAR_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @property
    def downloads_dir(self) -> Path:
        """Directory holding staged export files until their response is sent."""
        return self.data_dir / "downloads"


@lru_cache
def get_settings() -> Settings:
    """Cached settings accessor."""
    settings = Settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings


def reload_settings() -> Settings:
    """Re-read the environment, e.g. after a test changed `SOLAR_EXPORT_*` variables."""
    get_settings.cache_clear()
    return get_settings()


# Convenience alias used across the codebase.
settings = get_settings()
