"""Shared pytest fixtures for pluralia tests."""

from collections.abc import Iterator

import pytest

from pluralia import api
from pluralia.core.engine import Engine


@pytest.fixture
def engine() -> Engine:
    """Return a fresh engine with default settings."""
    return Engine()


@pytest.fixture
def default_engine(monkeypatch: pytest.MonkeyPatch) -> Iterator[Engine]:
    """Give the module-level functions a fresh default engine for one test."""
    monkeypatch.delenv("PLURALIA_CLASSICAL", raising=False)
    monkeypatch.setattr(api, "_default_engine", None)
    yield api.default_engine()
    api.default_engine().reset()
