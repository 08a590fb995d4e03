"""Runtime configuration, read from ``POS_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="POS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: str = f"sqlite:///{_DATA_DIR / 'pos.db'}"
    sql_echo: bool = False
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()
