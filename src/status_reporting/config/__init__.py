"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_str, reset_default_values
from .settings import (
    APP_NAME_ENV,
    FLUSH_ENV,
    TIMEZONE_ENV,
    ReporterSettings,
    load_app_name_setting,
    load_flush_setting,
    load_reporter_settings,
    load_timezone_setting,
    validate_timezone_name,
)

__all__ = [
    "APP_NAME_ENV",
    "ConfigurationError",
    "FLUSH_ENV",
    "ReporterSettings",
    "TIMEZONE_ENV",
    "env_bool",
    "env_str",
    "load_app_name_setting",
    "load_flush_setting",
    "load_reporter_settings",
    "load_timezone_setting",
    "reset_default_values",
    "validate_timezone_name",
]
