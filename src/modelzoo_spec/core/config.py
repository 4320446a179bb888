# src/modelzoo_spec/core/config.py
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "10 days"

    # Reading
    READER_PROFILE: str = "current"  # "current" | "legacy"
    UPGRADE_ON_READ: bool = False

    # Bundles
    MODEL_FILE_NAME: str = "model.yaml"

    model_config = SettingsConfigDict(
        env_prefix="MODELZOO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

_settings: Optional[Settings] = None

def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

def reset_settings() -> None:
    """Drop the cached settings so the next lookup re-reads the environment."""
    global _settings
    _settings = None
