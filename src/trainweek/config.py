"""Application settings loaded from environment variables.

Every setting can be overridden with a ``TRAINWEEK_`` prefixed variable or a
``.env`` file, e.g. ``TRAINWEEK_STORAGE=memory``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .db.engine import DATA_DIR, DB_FILENAME, get_db_path


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TRAINWEEK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------
    storage: Literal["sqlite", "memory"] = Field(
        default="sqlite",
        description="Persistence backend: sqlite file or process memory",
    )
    data_dir: Path = Field(default=DATA_DIR, description="Directory holding the SQLite file")
    database_name: str = Field(default=DB_FILENAME)
    seed_demo_data: bool = Field(
        default=False,
        description="Insert demo users and workouts on startup when the store is empty",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: str = Field(default="INFO")
    log_file: str | None = Field(default=None)

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def db_path(self) -> Path:
        return get_db_path(self.data_dir, self.database_name)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
