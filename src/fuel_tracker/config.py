"""Fuel tracker server configuration."""

import os
from functools import lru_cache
from typing import Annotated, Any, Literal, Optional

from dotenv import load_dotenv
from pydantic import AnyUrl, BeforeValidator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_env_file() -> str:
    """
    Determine the .env file to use.
    It is chosen based on the ENVIRONMENT value.
    """
    env_file = {
        "production": "../.env",
        "development": "../.env.dev",
    }
    load_dotenv(env_file.get(os.getenv("ENVIRONMENT", "development")), override=True)
    return env_file.get(os.getenv("ENVIRONMENT", "development"), "../.env.dev")


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",")]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    """Server config settings."""

    model_config = SettingsConfigDict(
        env_file=get_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,  # Ensures exact variable name matching
        env_ignore_empty=True,
        extra="ignore",
    )
    ENVIRONMENT: Literal["development", "production"] = "development"
    PROJECT_NAME: str = "Fuel Tracker API"

    # API settings
    DOMAIN: str = "0.0.0.0"
    DEBUG_MODE: bool = False
    FASTAPI_API_KEY_HEADER: str = os.getenv("FASTAPI_API_KEY_HEADER", "default_key")
    FASTAPI_API_KEY: str = os.getenv("FASTAPI_API_KEY", "default_key")
    FASTAPI_CORS_ORIGINS: Annotated[list[AnyUrl] | str, BeforeValidator(parse_cors)] = (
        []
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.FASTAPI_CORS_ORIGINS]

    # Redis settings
    REDIS_HOST: str = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT: int = int(os.getenv("REDIS_PORT", "6379"))
    REDIS_DB: int = 0
    REDIS_PASSWORD: Optional[str] = None
    REDIS_SOCKET_TIMEOUT: float = 5.0

    # Snapshot storage
    STORAGE_KEY: str = os.getenv("STORAGE_KEY", "@fuel_tracker_data")

    # Statistics settings
    MONTHLY_FUEL_BALANCE_MODE: Literal["projected", "record_amount"] = "projected"

    TIMEZONE: str = os.getenv("TIMEZONE", "Europe/Moscow")


# Global settings instance with caching.
@lru_cache()
def get_settings() -> Settings:
    settings = Settings()

    return settings
