"""Reporter settings resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytz

from .errors import ConfigurationError
from .runtime import env_bool, env_str

FLUSH_ENV = "STATUS_REPORTER_FLUSH"
TIMEZONE_ENV = "STATUS_REPORTER_TIMEZONE"
APP_NAME_ENV = "STATUS_REPORTER_APP_NAME"


@dataclass(frozen=True)
class ReporterSettings:
    """Defaults applied by a StatusReporter when no explicit value is given."""

    flush: bool = True
    timezone_name: Optional[str] = None
    default_app_name: Optional[str] = None


def validate_timezone_name(tz_name: str, param_name: str = TIMEZONE_ENV) -> str:
    """Return ``tz_name`` if pytz recognises it, raise ConfigurationError otherwise."""
    try:
        pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError as exc:
        raise ConfigurationError.invalid_timezone(param_name, tz_name) from exc
    return tz_name


def load_flush_setting() -> bool:
    return bool(env_bool(FLUSH_ENV, or_value=True))


def load_timezone_setting() -> Optional[str]:
    timezone_name = env_str(TIMEZONE_ENV)
    if timezone_name is not None:
        validate_timezone_name(timezone_name)
    return timezone_name


def load_app_name_setting() -> Optional[str]:
    return env_str(APP_NAME_ENV)


def load_reporter_settings() -> ReporterSettings:
    return ReporterSettings(
        flush=load_flush_setting(),
        timezone_name=load_timezone_setting(),
        default_app_name=load_app_name_setting(),
    )


__all__ = [
    "APP_NAME_ENV",
    "FLUSH_ENV",
    "TIMEZONE_ENV",
    "ReporterSettings",
    "load_app_name_setting",
    "load_flush_setting",
    "load_reporter_settings",
    "load_timezone_setting",
    "validate_timezone_name",
]
