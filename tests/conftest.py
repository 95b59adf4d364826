import pytest

from geobee.config.settings import get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    # Settings are cached process-wide; each test sees its own env and leaves a clean cache.
    monkeypatch.delenv("GEOBEE_CONFIG_PATH", raising=False)
    monkeypatch.delenv("GEOBEE_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
