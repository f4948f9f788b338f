"""
Runtime settings.

Read from ~/.config/musicctl/.env (or $MUSICCTL_CONFIG) with python-dotenv;
values in the process environment win over the file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from .constants import (
    DEFAULT_DBUS_TIMEOUT_MS,
    DEFAULT_ENV_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_NOTIFY_TIMEOUT_MS,
    ENV_CONFIG_PATH,
    ENV_DBUS_TIMEOUT,
    ENV_INSTANCE,
    ENV_LOG_LEVEL,
    ENV_NOTIFY_TIMEOUT,
)
from .errors import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Attributes:
        instance: Default player display name for --instance (None = any)
        dbus_timeout_ms: Timeout for every D-Bus call
        notify_timeout_ms: Expire timeout passed to Notify (0 = never)
        log_level: Root log level name
    """
    instance: Optional[str] = None
    dbus_timeout_ms: int = DEFAULT_DBUS_TIMEOUT_MS
    notify_timeout_ms: int = DEFAULT_NOTIFY_TIMEOUT_MS
    log_level: str = DEFAULT_LOG_LEVEL


def _env_path(environ: Mapping[str, str]) -> Path:
    return Path(environ.get(ENV_CONFIG_PATH) or DEFAULT_ENV_PATH).expanduser()


def _int(values: Mapping[str, Optional[str]], key: str, default: int) -> int:
    raw = values.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}")


def load_settings(env_path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Merge the env file and the process environment into Settings."""
    if environ is None:
        environ = os.environ
    path = env_path or _env_path(environ)

    values = {}
    if path.exists():
        logger.debug(f"Loading settings from {path}")
        values.update(dotenv_values(path))
    values.update({k: v for k, v in environ.items() if k.startswith("MUSICCTL_")})

    log_level = (values.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"{ENV_LOG_LEVEL} must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Settings(
        instance=values.get(ENV_INSTANCE) or None,
        dbus_timeout_ms=_int(values, ENV_DBUS_TIMEOUT, DEFAULT_DBUS_TIMEOUT_MS),
        notify_timeout_ms=_int(values, ENV_NOTIFY_TIMEOUT, DEFAULT_NOTIFY_TIMEOUT_MS),
        log_level=log_level,
    )
