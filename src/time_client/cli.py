"""Command-line client for the time tool server."""

from __future__ import annotations

import argparse
import json
from typing import Any

import httpx


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Call the MCP time tool server")
    parser.add_argument("--server-url", default="http://localhost:8080", help="Tool server base URL")
    parser.add_argument("--timeout", type=float, default=10.0, help="Request timeout seconds")
    parser.add_argument("--verbose", action="store_true", help="Print trace id and response meta")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("tools", help="List registered tools")

    now = sub.add_parser("now", help="Current time in a timezone")
    now.add_argument("--timezone", default="", help="IANA timezone name (default UTC)")

    convert = sub.add_parser("convert", help="Convert HH:MM between timezones")
    convert.add_argument("source_timezone", help="Source IANA timezone name")
    convert.add_argument("time", help="Time in 24-hour format (HH:MM)")
    convert.add_argument("target_timezone", help="Target IANA timezone name")
    return parser


def _request(args: argparse.Namespace) -> tuple[str, str, dict[str, Any] | None]:
    if args.command == "tools":
        return "GET", "/tools", None
    if args.command == "now":
        return "POST", "/tools/get_current_time", {"timezone": args.timezone}
    return (
        "POST",
        "/tools/convert_time",
        {
            "source_timezone": args.source_timezone,
            "time": args.time,
            "target_timezone": args.target_timezone,
        },
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    method, path, payload = _request(args)
    url = f"{args.server_url.rstrip('/')}{path}"

    # Avoid inheriting system proxy settings that can break localhost calls.
    try:
        with httpx.Client(timeout=args.timeout, trust_env=False) as client:
            resp = client.request(method, url, json=payload)
    except httpx.TimeoutException:
        print("Request timed out. Try again with a longer timeout, e.g. --timeout 30")
        return 1
    except httpx.RequestError as exc:
        print(f"Unable to reach tool server at {args.server_url}: {exc}")
        return 1
    if resp.status_code >= 400:
        print(f"Request failed: {resp.status_code}")
        print(resp.text)
        return 1

    data = resp.json()
    if args.command == "tools":
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return 0

    if data.get("ok"):
        print(json.dumps(data.get("data"), ensure_ascii=False, indent=2))
    else:
        error = data.get("error") or {}
        print(f"Error [{error.get('code')}]: {error.get('message')}")

    if args.verbose:
        print("\n--- trace_id ---")
        print(data.get("meta", {}).get("trace_id"))
        print("\n--- meta ---")
        print(json.dumps(data.get("meta", {}), ensure_ascii=False, indent=2))

    return 0 if data.get("ok") else 1


if __name__ == "__main__":
    raise SystemExit(main())
