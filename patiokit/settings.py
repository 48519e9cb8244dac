"""Service settings and logging setup."""

from __future__ import annotations
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the HTTP service, read from PATIO_* environment variables."""
    model_config = SettingsConfigDict(env_prefix="PATIO_")

    app_name: str = "Patio Configurator"
    version: str = "0.1.0"

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    log_level: str = "INFO"
    catalog_id: str = "stratco-outback"
    cors_origins: list[str] = ["*"]


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
