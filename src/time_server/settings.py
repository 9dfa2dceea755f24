"""Time server configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(ENV_FILE, override=False)

# Values given on the command line; they win over the environment.
_overrides: dict[str, Any] = {}


class TimeServerSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MCP_TIME_",
        env_file=str(ENV_FILE),
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 8080

    # Empty means "detect from the host".
    local_timezone: str = ""


@lru_cache(maxsize=1)
def get_settings() -> TimeServerSettings:
    return TimeServerSettings(**_overrides)


def override_settings(**values: Any) -> TimeServerSettings:
    _overrides.update({key: value for key, value in values.items() if value is not None})
    get_settings.cache_clear()
    return get_settings()
