"""Shared tool schemas (single source of truth).

The server, the CLI client and the tests all import these models to avoid drift.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolError(BaseModel):
    """Normalized error payload returned by tools."""
    code: str
    message: str
    details: dict[str, Any] | None = None


class ToolMeta(BaseModel):
    """Metadata attached to tool responses for observability."""
    tool_name: str
    trace_id: str
    latency_ms: int | None = None


class ToolResponse(BaseModel):
    """Unified response wrapper for all tools."""
    ok: bool
    data: Any | None = None
    error: ToolError | None = None
    meta: ToolMeta


class GetCurrentTimeInput(BaseModel):
    """Input for get_current_time."""
    timezone: str | None = Field(
        default=None,
        description=(
            "IANA timezone name (e.g., 'America/New_York', 'Europe/London'). "
            "Use '{local_tz}' as local timezone if no timezone provided by the user."
        ),
    )


class ConvertTimeInput(BaseModel):
    """Input for convert_time. Empty values are rejected by the tool itself."""
    source_timezone: str = Field(
        ...,
        description=(
            "Source IANA timezone name (e.g., 'America/New_York', 'Europe/London'). "
            "Use '{local_tz}' as local timezone if no source timezone provided by the user."
        ),
    )
    time: str = Field(..., description="Time to convert in 24-hour format (HH:MM)")
    target_timezone: str = Field(
        ...,
        description=(
            "Target IANA timezone name (e.g., 'Asia/Tokyo', 'America/San_Francisco'). "
            "Use '{local_tz}' as local timezone if no target timezone provided by the user."
        ),
    )


class TimeResult(BaseModel):
    """A civil instant in a named zone."""
    model_config = ConfigDict(frozen=True)

    timezone: str
    datetime: str
    day_of_week: str
    is_dst: bool


class TimeConversionResult(BaseModel):
    """Output for convert_time."""
    model_config = ConfigDict(frozen=True)

    source: TimeResult
    target: TimeResult
    time_difference: str


@dataclass(frozen=True)
class ToolSpec:
    """Tool registry metadata used by the server and the client."""
    name: str
    description: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]

    def input_schema(self, local_tz: str) -> dict[str, Any]:
        """JSON schema of the input model with the local zone filled into field docs."""
        schema = copy.deepcopy(self.input_model.model_json_schema())
        for prop in schema.get("properties", {}).values():
            if "description" in prop:
                prop["description"] = prop["description"].replace("{local_tz}", local_tz)
        return schema
