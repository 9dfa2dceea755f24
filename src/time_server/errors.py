"""Typed tool errors.

Every error carries a stable ``code`` so the server can report it in the
response envelope without inspecting the message.
"""

from __future__ import annotations


class TimeToolError(RuntimeError):
    code = "TOOL_ERROR"

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingField(TimeToolError):
    code = "MISSING_FIELD"

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is required", {"field": field})
        self.field = field


class InvalidTimeFormat(TimeToolError):
    code = "INVALID_TIME_FORMAT"

    def __init__(self, value: str, expected: str = "HH:MM [24-hour format]") -> None:
        super().__init__(f"invalid time format. Expected {expected}", {"value": value})
        self.value = value


class UnknownTimezone(TimeToolError):
    code = "UNKNOWN_TIMEZONE"

    def __init__(self, name: str, field: str | None = None) -> None:
        message = f'unknown timezone "{name}"'
        if field:
            # e.g. "invalid source timezone: unknown timezone "Mars/Base""
            message = f"invalid {field.replace('_', ' ')}: {message}"
        super().__init__(message, {"timezone": name, "field": field})
        self.name = name
        self.field = field


class EmptyInput(TimeToolError):
    code = "EMPTY_INPUT"

    def __init__(self, what: str = "time string") -> None:
        super().__init__(f"{what} is empty")
