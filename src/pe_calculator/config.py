"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    base_url: str = "http://localhost:8000/"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="PE_CALCULATOR_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
