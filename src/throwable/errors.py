"""Exceptions raised by the throwable package."""

from __future__ import annotations

from typing import Any


class UnwrapError(ValueError):
    """Raised by ``Result.unwrap()`` on a failed result.

    The original error payload is kept unchanged on ``error``; the message is
    the payload's own string form.
    """

    NO_PAYLOAD_MESSAGE = "Called unwrap on Err with no error payload"

    def __init__(self, error: Any = None) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        if self.error is None:
            return self.NO_PAYLOAD_MESSAGE
        return str(self.error)
