import pytest

from time_server import settings as settings_module
from time_server.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    # Clear cached settings so env and overrides take effect per test
    monkeypatch.setattr(settings_module, "_overrides", {})
    monkeypatch.delenv("MCP_TIME_LOCAL_TIMEZONE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
