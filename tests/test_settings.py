import uvicorn

from time_server import server
from time_server.settings import TimeServerSettings, get_settings, override_settings


def test_settings_defaults():
    settings = TimeServerSettings()
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.local_timezone == ""


def test_settings_read_env(monkeypatch):
    monkeypatch.setenv("MCP_TIME_PORT", "9000")
    monkeypatch.setenv("MCP_TIME_LOCAL_TIMEZONE", "Europe/Paris")
    settings = get_settings()
    assert settings.port == 9000
    assert settings.local_timezone == "Europe/Paris"


def test_overrides_win_over_env(monkeypatch):
    monkeypatch.setenv("MCP_TIME_PORT", "9000")
    settings = override_settings(port=9100, local_timezone=None)
    assert settings.port == 9100
    assert settings.local_timezone == ""
    assert get_settings() is settings


def test_main_applies_flags(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(uvicorn, "run", fake_run)
    server.main(["--port", "9001", "--local-timezone", "America/New_York"])

    assert calls["app"] is server.app
    assert calls["port"] == 9001
    assert calls["host"] == "0.0.0.0"
    assert get_settings().local_timezone == "America/New_York"
