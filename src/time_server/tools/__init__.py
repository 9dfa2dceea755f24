"""Tool registry for the time server."""

from __future__ import annotations

from typing import Callable

from ..schemas import (
    ConvertTimeInput,
    GetCurrentTimeInput,
    TimeConversionResult,
    TimeResult,
    ToolSpec,
)
from .time import convert_time, get_current_time

ToolHandler = Callable[[object, object, str], object]

TOOL_SPECS: dict[str, ToolSpec] = {
    "get_current_time": ToolSpec(
        name="get_current_time",
        description="Get current time in a specific timezone",
        input_model=GetCurrentTimeInput,
        output_model=TimeResult,
    ),
    "convert_time": ToolSpec(
        name="convert_time",
        description="Convert time between timezones",
        input_model=ConvertTimeInput,
        output_model=TimeConversionResult,
    ),
}

TOOL_HANDLERS: dict[str, ToolHandler] = {
    "get_current_time": get_current_time,
    "convert_time": convert_time,
}


def get_tool_spec(name: str) -> ToolSpec | None:
    return TOOL_SPECS.get(name)


def get_tool_handler(name: str) -> ToolHandler | None:
    return TOOL_HANDLERS.get(name)


def list_tool_specs() -> list[ToolSpec]:
    return list(TOOL_SPECS.values())
