"""Plain text rendering of log entries for console output."""

import json

from shiplog.core.models import FieldValue, LogEntry


def _render_value(value: FieldValue) -> str:
    # Line breaks are escaped so each entry stays on one line.
    if isinstance(value, str) and "\n" not in value and "\r" not in value:
        return value
    return json.dumps(value, separators=(",", ":"), default=str)


def format_entry(entry: LogEntry, subsystem: str) -> str:
    """Render an entry as a single line.

    Format is ``<timestamp> <subsystem> <severity> key=value ...`` with
    fields in their original order. Strings are written raw, other values
    as compact JSON.
    """
    parts = [str(entry.timestamp), subsystem, str(entry.severity)]
    parts.extend(f"{key}={_render_value(value)}" for key, value in entry.fields)
    return " ".join(parts)
