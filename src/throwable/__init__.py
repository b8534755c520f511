"""Result container for explicit, composable error propagation."""

import logging

from src.throwable.config import (
    LogLevel,
    ThrowableConfig,
    get_config,
    reset_config,
    set_config,
)
from src.throwable.errors import UnwrapError
from src.throwable.result import Err, Ok, Result, is_result

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Result",
    "Ok",
    "Err",
    "is_result",
    "UnwrapError",
    "ThrowableConfig",
    "LogLevel",
    "get_config",
    "set_config",
    "reset_config",
]
