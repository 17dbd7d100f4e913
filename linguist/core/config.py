from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_NAME = ".env"
env_path = Path(__file__).parent.parent.parent / ENV_FILE_NAME


class Settings(BaseSettings):
    LINGUIST_LOCALE: Optional[str] = None  # Overrides system locale detection
    LINGUIST_TRANSLATIONS_FILE: Optional[Path] = None  # Replaces the embedded table
    LINGUIST_LOCALE_ENV: str = "LANG"
    LOG_LEVEL: str = "INFO"

    @field_validator("LINGUIST_LOCALE", "LINGUIST_TRANSLATIONS_FILE", mode="before")
    @classmethod
    def blank_as_none(cls, v):  # type: ignore
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalise_level(cls, v):  # type: ignore
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return v

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    # .env is read on first call, not at import
    load_dotenv(env_path, override=False)
    return Settings()
