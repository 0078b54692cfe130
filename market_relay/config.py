from __future__ import annotations

"""Process configuration for the relay, read once at startup."""

import logging
import os
from typing import Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

DEFAULT_API_VERSION = "2025-10"
DEFAULT_PORT = 8080

ProductIdSource = Literal["body", "query", "either"]
LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

# env var name -> settings field
_ENV_FIELDS = {
    "SHOPIFY_ADMIN_TOKEN": "admin_token",
    "STORE_DOMAIN": "store_domain",
    "SHOPIFY_API_VERSION": "api_version",
    "PORT": "port",
    "HOST": "host",
    "PRODUCT_ID_SOURCE": "product_id_source",
    "LOG_LEVEL": "log_level",
}
_REQUIRED = ("SHOPIFY_ADMIN_TOKEN", "STORE_DOMAIN")


class ConfigurationError(RuntimeError):
    """Raised when the environment cannot produce usable settings."""

    def __init__(self, message: str, missing: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing = missing


class RelaySettings(BaseModel):
    """Immutable settings passed explicitly into the app factory."""

    model_config = ConfigDict(frozen=True)

    admin_token: SecretStr
    store_domain: str = Field(..., min_length=1)
    api_version: str = Field(DEFAULT_API_VERSION, min_length=1)
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)
    host: str = "0.0.0.0"
    product_id_source: ProductIdSource = "body"
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RelaySettings":
        """Build settings from ``environ`` (defaults to ``os.environ`` plus ``.env``)."""

        if environ is None:
            load_dotenv()
            environ = os.environ

        missing = tuple(name for name in _REQUIRED if not environ.get(name))
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}",
                missing=missing,
            )

        values = {
            field: environ[name]
            for name, field in _ENV_FIELDS.items()
            if environ.get(name)
        }
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid relay configuration: {exc}") from exc


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
