"""FastAPI app for the MCP-style time tool server.

This server exposes the time tools with structured I/O.
"""

from __future__ import annotations

import argparse
import time
import uuid
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from pydantic import ValidationError

from .errors import TimeToolError
from .logging import get_logger
from .schemas import ToolError, ToolMeta, ToolResponse
from .settings import get_settings, override_settings
from .tools import get_tool_handler, get_tool_spec, list_tool_specs
from .zones import local_default

logger = get_logger("server")

app = FastAPI(title="MCP Time Server", version="1.0.0")


@app.on_event("startup")
def log_startup_config() -> None:
    settings = get_settings()
    logger.info(
        "time_server_config",
        extra={
            "extra": {
                "local_timezone": local_default(settings.local_timezone),
                "local_timezone_override": bool(settings.local_timezone),
                "host": settings.host,
                "port": settings.port,
            }
        },
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/tools")
def list_tools() -> list[dict[str, Any]]:
    local_tz = local_default(get_settings().local_timezone)
    return [
        {
            "name": spec.name,
            "description": spec.description,
            "input_schema": spec.input_schema(local_tz),
            "output_schema": spec.output_model.model_json_schema(),
        }
        for spec in list_tool_specs()
    ]


@app.post("/tools/{tool_name}")
async def call_tool(tool_name: str, request: Request) -> ToolResponse:
    # Every tool call gets a trace_id for end-to-end debugging.
    trace_id = request.headers.get("x-trace-id") or str(uuid.uuid4())
    start = time.time()
    settings = get_settings()

    spec = get_tool_spec(tool_name)
    handler = get_tool_handler(tool_name)
    if not spec or not handler:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_name}")

    try:
        payload = await request.json()
        input_obj = spec.input_model.model_validate(payload)
        result = handler(input_obj, settings, trace_id)
        latency_ms = int((time.time() - start) * 1000)
        _log_call("tool_call", trace_id, tool_name, latency_ms)
        return ToolResponse(
            ok=True,
            data=result.model_dump(),
            error=None,
            meta=ToolMeta(tool_name=tool_name, trace_id=trace_id, latency_ms=latency_ms),
        )
    except ValidationError as exc:
        error = ToolError(code="INVALID_ARGUMENT", message=str(exc))
        return _failure("tool_validation_error", error, trace_id, tool_name, start)
    except TimeToolError as exc:
        error = ToolError(code=exc.code, message=exc.message, details=exc.details or None)
        return _failure("tool_time_error", error, trace_id, tool_name, start)
    except Exception as exc:  # noqa: BLE001
        error = ToolError(code="TOOL_ERROR", message=str(exc))
        return _failure("tool_error", error, trace_id, tool_name, start)


def _failure(
    event: str, error: ToolError, trace_id: str, tool_name: str, start: float
) -> ToolResponse:
    latency_ms = int((time.time() - start) * 1000)
    _log_call(event, trace_id, tool_name, latency_ms, error_code=error.code)
    return ToolResponse(
        ok=False,
        data=None,
        error=error,
        meta=ToolMeta(tool_name=tool_name, trace_id=trace_id, latency_ms=latency_ms),
    )


def _log_call(
    event: str, trace_id: str, tool_name: str, latency_ms: int, error_code: str | None = None
) -> None:
    fields: dict[str, Any] = {
        "trace_id": trace_id,
        "tool": tool_name,
        "latency_ms": latency_ms,
        "ok": error_code is None,
    }
    if error_code:
        fields["error_code"] = error_code
    logger.info(event, extra={"extra": fields})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the MCP time tool server")
    parser.add_argument(
        "--local-timezone",
        default=None,
        help="Override local timezone (e.g., 'America/New_York')",
    )
    parser.add_argument("--host", default=None, help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    return parser


def main(argv: list[str] | None = None) -> None:
    import uvicorn

    args = build_parser().parse_args(argv)
    settings = override_settings(
        local_timezone=args.local_timezone,
        host=args.host,
        port=args.port,
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
