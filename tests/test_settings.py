import importlib

import pytest

from ranking_service.config import settings


@pytest.fixture
def reload_settings(monkeypatch):
    yield lambda: importlib.reload(settings)
    monkeypatch.undo()
    importlib.reload(settings)


def test_defaults(reload_settings, monkeypatch):
    for name in ("DEFAULT_TOP_K", "RELATED_VIDEOS_LIMIT", "MAX_CANDIDATES", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reloaded = reload_settings()
    assert reloaded.DEFAULT_TOP_K is None
    assert reloaded.RELATED_VIDEOS_LIMIT == 6
    assert reloaded.MAX_CANDIDATES == 1000
    assert reloaded.LOG_LEVEL == "INFO"


def test_values_from_environment(reload_settings, monkeypatch):
    monkeypatch.setenv("DEFAULT_TOP_K", "20")
    monkeypatch.setenv("RELATED_VIDEOS_LIMIT", "4")
    monkeypatch.setenv("MAX_CANDIDATES", "50")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    reloaded = reload_settings()
    assert reloaded.DEFAULT_TOP_K == 20
    assert reloaded.RELATED_VIDEOS_LIMIT == 4
    assert reloaded.MAX_CANDIDATES == 50
    assert reloaded.LOG_LEVEL == "DEBUG"


def test_blank_top_k_means_no_limit(reload_settings, monkeypatch):
    monkeypatch.setenv("DEFAULT_TOP_K", "  ")
    assert reload_settings().DEFAULT_TOP_K is None
