from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring settings loaded from environment.

    Environment variables are prefixed with ``ZAMINSEVA_``. Example:
        set ZAMINSEVA_SCORE_RANDOM_SEED=42
    """

    SCORE_CACHE_MAX_ENTRIES: int = 1000
    # Disable to get variance-free scores (stable across processes)
    SCORE_VARIANCE_ENABLED: bool = True
    SCORE_RANDOM_SEED: int | None = None
    EXPORT_DIR: Path = Path("Exports")

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(env_prefix="ZAMINSEVA_", case_sensitive=False)


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


settings = get_settings()
