"""Runtime configuration for the throwable package.

Settings only affect how ``unwrap()`` escalates a failure; construction and
chaining are never configurable. All settings can be overridden via
environment variables with the THROWABLE_ prefix.
Example: THROWABLE_UNWRAP_LOG_LEVEL=warning, THROWABLE_RAISE_EXCEPTION_PAYLOADS=false
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class LogLevel(str, Enum):
    """Level of the record emitted when ``unwrap()`` raises."""

    OFF = "off"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def levelno(self) -> Optional[int]:
        """Numeric ``logging`` level, or None when logging is off."""
        if self is LogLevel.OFF:
            return None
        return logging.getLevelName(self.value.upper())


class ThrowableConfig(BaseSettings):
    """Settings for ``Result.unwrap()``."""

    model_config = {"env_prefix": "THROWABLE_"}

    raise_exception_payloads: bool = Field(
        default=True,
        description="Raise exception payloads as-is instead of wrapping them in UnwrapError",
    )
    unwrap_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="Level of the log record emitted when unwrap() raises",
    )


_config: Optional[ThrowableConfig] = None


def get_config() -> ThrowableConfig:
    """Return the active config, reading the environment on first use."""
    global _config
    if _config is None:
        _config = ThrowableConfig()
    return _config


def set_config(config: ThrowableConfig) -> None:
    """Replace the active config."""
    global _config
    _config = config


def reset_config() -> None:
    """Drop the active config so the next ``get_config()`` re-reads the environment."""
    global _config
    _config = None
