"""Shared pytest fixtures for the argvalidator test-suite."""
from __future__ import annotations

import pytest

from argvalidator.config import REPR_LIMIT_ENV
from argvalidator.validation import Validator


class Clock:
    """Receiver with methods used by builder tests."""

    def __init__(self, stamp: str = "20251019"):
        self.stamp = stamp
        self.calls = 0

    def now(self) -> str:
        self.calls += 1
        return self.stamp

    def join(self, *parts: str) -> str:
        return " ".join(parts)


@pytest.fixture()
def validator() -> Validator:
    """Fresh validator with a private copy of the built-in constraints."""
    return Validator()


@pytest.fixture()
def clock() -> Clock:
    return Clock()


@pytest.fixture(autouse=True)
def _default_repr_limit(monkeypatch):  # noqa: D401
    """Keep message formatting independent of the developer's environment."""
    monkeypatch.delenv(REPR_LIMIT_ENV, raising=False)
    yield


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield
