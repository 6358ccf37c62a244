"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings with compiled-in defaults for the target school."""

    neis_base_url: str = "https://open.neis.go.kr/hub"
    relay_url: str = "https://api.allorigins.win/raw"
    office_code: str = "J10"
    school_code: str = "7530079"
    timezone: str = "Asia/Seoul"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
