"""Общие fixtures тестов numerus."""

import pytest

from numerus.cli import PRETTY_ENV_VAR


@pytest.fixture(autouse=True)
def _no_pretty_env(monkeypatch):
    """Переменная окружения NUMERUS_PRETTY не влияет на тесты по умолчанию."""
    monkeypatch.delenv(PRETTY_ENV_VAR, raising=False)
