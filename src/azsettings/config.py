"""Configuration of the azsettings library itself.

These knobs control logging and which sources the default resolution chain
uses. They are separate from the Azure keys in ``azsettings.keys``.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field, ValidationError, field_validator

_config_logger = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


class LoggingSettings(BaseModel):
    level: str = Field(default="INFO", description="Python logging level name")
    file: str | None = Field(default=None, description="Optional log file path")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized


class SourceSettings(BaseModel):
    config_file: str | None = Field(
        default=None,
        description="Optional YAML file consulted between context and environment",
    )
    dotenv_path: str | None = Field(
        default=None,
        description="Optional dotenv file layered under the process environment",
    )
    use_environment: bool = Field(
        default=True,
        description="If False, the environment is not used as a fallback source.",
    )


class Settings(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    sources: SourceSettings = Field(default_factory=SourceSettings)


ENV_KEYS = {
    "log_level": "AZSETTINGS_LOG_LEVEL",
    "log_file": "AZSETTINGS_LOG_FILE",
    "config_file": "AZSETTINGS_CONFIG_FILE",
    "dotenv_path": "AZSETTINGS_DOTENV_PATH",
    "use_environment": "AZSETTINGS_USE_ENVIRONMENT",
}

_TRUE_VALUES = frozenset({"1", "true", "yes"})


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_path(key: str) -> str | None:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return None
    return os.path.expanduser(value.strip())


def load_settings() -> Settings:
    """Load configuration and cache the result."""

    return _load_settings_cached()


@lru_cache(maxsize=1)
def _load_settings_cached() -> Settings:
    settings_data: dict[str, object] = {
        "logging": {
            "level": os.getenv(ENV_KEYS["log_level"], LoggingSettings().level),
            "file": _env_path(ENV_KEYS["log_file"]),
        },
        "sources": {
            "config_file": _env_path(ENV_KEYS["config_file"]),
            "dotenv_path": _env_path(ENV_KEYS["dotenv_path"]),
            "use_environment": _env_bool(
                ENV_KEYS["use_environment"],
                SourceSettings().use_environment,
            ),
        },
    }

    try:
        settings = Settings.model_validate(settings_data)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid configuration: {exc}") from exc

    _config_logger.debug(
        "Loaded azsettings configuration: config_file=%s dotenv_path=%s",
        settings.sources.config_file,
        settings.sources.dotenv_path,
    )
    return settings
