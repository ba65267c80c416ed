"""Centralized application configuration.

All settings are read from environment variables (prefixed with CHESS_SIM_) or a .env file.
"""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHESS_SIM_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Persistence of simulation runs
    database_url: str = "sqlite:///./simulations.db"
    echo_sql: bool = False

    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
