import logging

import structlog
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ecs_https_app.errors import StartupConfigurationError

CERT_FILE = "/app/server.crt"
KEY_FILE = "/app/server.key"

LISTEN_HOST = "0.0.0.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )

    port: int = Field(default=443, alias="PORT", ge=1, le=65535)
    loglevel: str = Field(default="INFO", alias="LOG_LEVEL")


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise StartupConfigurationError(f"invalid configuration: {e}") from e


def configure_logging(loglevel: str):
    level = logging.getLevelNamesMapping().get(loglevel.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
