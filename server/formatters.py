"""JSON formatting utilities for decoded log lines."""

import enum
import json
from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from flightlog.igc import DecodeError, Record
from flightlog.session import DecodedLine

__all__ = ["format_decoded_line", "format_error", "format_message", "format_record"]


def _json_value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, tuple):
        return [_json_value(item) for item in value]
    if isinstance(value, Mapping) and not isinstance(value, dict):
        return dict(value)
    return value


def _json_fields(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    return {key: _json_value(value) for key, value in pairs}


def format_record(record: Record) -> dict[str, Any]:
    """Convert a record into a JSON-ready dict tagged with its record type."""
    return {
        "record_type": record.kind.value,
        "name": type(record).__name__,
        **asdict(record, dict_factory=_json_fields),
    }


def format_error(error: DecodeError) -> dict[str, Any]:
    """Convert a decode error into a JSON-ready dict with a readable message."""
    return {
        "error": type(error).__name__,
        "message": error.message,
        **asdict(error, dict_factory=_json_fields),
    }


def format_decoded_line(decoded: DecodedLine) -> dict[str, Any]:
    """Convert one decoded line into a JSON-ready dict."""
    message: dict[str, Any] = {"line_number": decoded.line_number, "ok": decoded.ok}
    if decoded.error is not None:
        message["error"] = format_error(decoded.error)
    else:
        message["record"] = format_record(decoded.record)
    return message


def format_message(decoded: DecodedLine) -> str:
    """Serialize one decoded line into a JSON string for WebSocket transmission."""
    return json.dumps(format_decoded_line(decoded))
