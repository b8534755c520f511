"""Shared fixtures."""

from typing import Iterator

import pytest

from src.throwable.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test a config read from a clean THROWABLE_ environment."""
    monkeypatch.delenv("THROWABLE_RAISE_EXCEPTION_PAYLOADS", raising=False)
    monkeypatch.delenv("THROWABLE_UNWRAP_LOG_LEVEL", raising=False)
    reset_config()
    yield
    reset_config()
