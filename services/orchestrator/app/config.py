"""Service settings loaded from environment variables."""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

ENV_PREFIX = "KINDLE_BUILDER_"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ServiceConfigError(ValueError):
    """Raised when environment configuration is missing or invalid."""


class ServiceSettings(BaseModel):
    """Runtime settings for the manuscript service."""

    model_config = ConfigDict(frozen=True)

    service_name: str = Field("orchestrator", min_length=1)
    log_level: str = "INFO"
    metrics_enabled: bool = True
    metrics_endpoint: str = "/metrics"
    allowed_origins: tuple[str, ...] = ("http://localhost:3000",)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("metrics_endpoint")
    @classmethod
    def validate_metrics_endpoint(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("metrics endpoint must start with '/'")
        return value


def load_service_settings(environ: Mapping[str, str] | None = None) -> ServiceSettings:
    """Load settings from the environment.

    Environment variables used:
        KINDLE_BUILDER_SERVICE_NAME
        KINDLE_BUILDER_LOG_LEVEL
        KINDLE_BUILDER_METRICS_ENABLED (boolean)
        KINDLE_BUILDER_METRICS_ENDPOINT
        KINDLE_BUILDER_ALLOWED_ORIGINS (comma separated)

    Raises:
        ServiceConfigError: If any value is invalid.
    """

    env = os.environ if environ is None else environ

    def read_env(key: str) -> str | None:
        value = env.get(f"{ENV_PREFIX}{key}")
        if value is None or not value.strip():
            return None
        return value.strip()

    def parse_bool(value: str) -> bool:
        lowered = value.lower()
        if lowered in {"true", "1", "yes", "on"}:
            return True
        if lowered in {"false", "0", "no", "off"}:
            return False
        raise ServiceConfigError(f"{ENV_PREFIX}METRICS_ENABLED must be a boolean, got {value!r}")

    overrides: dict[str, object] = {}
    if (service_name := read_env("SERVICE_NAME")) is not None:
        overrides["service_name"] = service_name
    if (log_level := read_env("LOG_LEVEL")) is not None:
        overrides["log_level"] = log_level
    if (metrics_enabled := read_env("METRICS_ENABLED")) is not None:
        overrides["metrics_enabled"] = parse_bool(metrics_enabled)
    if (metrics_endpoint := read_env("METRICS_ENDPOINT")) is not None:
        overrides["metrics_endpoint"] = metrics_endpoint
    if (origins := read_env("ALLOWED_ORIGINS")) is not None:
        overrides["allowed_origins"] = tuple(
            origin.strip() for origin in origins.split(",") if origin.strip()
        )

    try:
        return ServiceSettings(**overrides)
    except ValidationError as exc:
        raise ServiceConfigError(str(exc)) from exc
