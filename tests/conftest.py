import pytest

from universe.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in (
        "SPARKY_GCD_LOG_LEVEL",
        "SPARKY_GCD_LOG_JSON",
        "SPARKY_GCD_MAX_ITEMS",
        "SPARKY_GCD_DEFAULT_ALGORITHM",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
