from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAGIC_PATH = Path(__file__).parent / "data" / "mime.types"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MIMETABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    magic: Path | None = None  # Alternate magic table; None means the bundled one
    log_level: str = "INFO"

    @field_validator("magic", mode="before")
    @classmethod
    def _blank_magic_is_default(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value!r}")
        return value

    @property
    def magic_path(self) -> Path:
        """Effective magic table path (configured or bundled)."""
        return self.magic if self.magic is not None else DEFAULT_MAGIC_PATH


@lru_cache
def get_settings() -> Settings:
    return Settings()
