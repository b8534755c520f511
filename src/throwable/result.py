"""Result type for explicit error handling without exceptions.

A ``Result[T, E]`` is either a success holding a value or a failure holding an
error payload. Fallible steps are chained with ``pipe``; the first failure
short-circuits the rest of the chain. Callers get the value back out with
``or_`` (fallback on failure) or ``unwrap`` (raise on failure).

    Ok(10).pipe(lambda x: x + 10).unwrap()      # 20
    Err("bad").pipe(lambda x: x + 10).or_(0)    # 0
"""

from __future__ import annotations

import logging
from dataclasses import InitVar, dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from pydantic import ValidationError

from src.throwable.config import ThrowableConfig, get_config
from src.throwable.errors import UnwrapError

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")

# Only Result.ok / Result.err hold this token.
_CONSTRUCT = object()


@dataclass(frozen=True, slots=True, repr=False)
class Result(Generic[T, E]):
    """Success or failure, fixed at construction.

    Build instances with ``Ok`` / ``Err``; calling ``Result(...)`` directly
    raises ``TypeError``.
    """

    _ok: bool
    _value: Optional[T]
    _error: Optional[E]
    _token: InitVar[object]

    def __post_init__(self, _token: object) -> None:
        if _token is not _CONSTRUCT:
            raise TypeError("Result instances are created with Ok() or Err()")

    @classmethod
    def ok(cls, value: Optional[T] = None) -> Result[T, Any]:
        """Create a successful result. ``value`` may be omitted."""
        return cls(True, value, None, _CONSTRUCT)

    @classmethod
    def err(cls, error: Optional[E] = None) -> Result[Any, E]:
        """Create a failed result. ``error`` may be omitted."""
        return cls(False, None, error, _CONSTRUCT)

    @property
    def is_ok(self) -> bool:
        return self._ok

    @property
    def is_error(self) -> bool:
        return not self._ok

    @property
    def value(self) -> Optional[T]:
        """The wrapped value, or None on a failed result."""
        return self._value

    @property
    def error(self) -> Optional[E]:
        """The wrapped error, or None on a successful result."""
        return self._error

    def pipe(self, func: Callable[[T], Union[U, Result[U, E]]]) -> Result[U, E]:
        """Chain a step that may itself fail.

        On a failure ``func`` is not called and this result is returned
        unchanged. On a success ``func(value)`` is called once: a returned
        ``Result`` is passed through as-is, any other return value is
        wrapped in ``Ok``.
        """
        if not self._ok:
            return self  # type: ignore[return-value]
        ret = func(self._value)  # type: ignore[arg-type]
        if isinstance(ret, Result):
            return ret
        return Result.ok(ret)

    def or_(self, fallback: U) -> Union[T, U]:
        """Return the value on success, otherwise ``fallback``."""
        if self._ok:
            return self._value  # type: ignore[return-value]
        return fallback

    def unwrap(self) -> T:
        """Return the value on success, otherwise raise the error.

        Exception payloads are raised as they are (unless
        ``raise_exception_payloads`` is turned off); any other payload is
        raised as ``UnwrapError`` with the payload on ``UnwrapError.error``.
        """
        if self._ok:
            return self._value  # type: ignore[return-value]

        config = _unwrap_config()
        levelno = config.unwrap_log_level.levelno
        if levelno is not None:
            logger.log(levelno, "unwrap() called on %r", self)

        payload = self._error
        if isinstance(payload, BaseException):
            if config.raise_exception_payloads:
                # Fresh traceback per escalation; the stored payload is shared.
                raise payload.with_traceback(None)
            raise UnwrapError(payload) from payload
        raise UnwrapError(payload)

    def __repr__(self) -> str:
        if self._ok:
            return f"Ok({self._value!r})"
        return f"Err({self._error!r})"


Ok = Result.ok
Err = Result.err


def is_result(obj: object) -> bool:
    """Return True if ``obj`` was built by ``Ok`` or ``Err``."""
    return isinstance(obj, Result)


def _unwrap_config() -> ThrowableConfig:
    """Active config, or the defaults when the environment does not validate."""
    try:
        return get_config()
    except ValidationError as e:
        logger.warning("Invalid THROWABLE_ settings, using defaults: %s", e)
        return ThrowableConfig.model_construct()
