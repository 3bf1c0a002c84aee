from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    staleness_threshold_s: int = Field(default=1800, alias="PEPA_STALENESS_THRESHOLD_S", ge=0)
    default_route: str = Field(default="dashboard", alias="PEPA_DEFAULT_ROUTE")
    log_level: str = Field(default="INFO", alias="PEPA_LOG_LEVEL")


def load_settings() -> Settings:
    return Settings()
