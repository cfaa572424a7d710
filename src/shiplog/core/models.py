"""Core domain models for queued log data."""

import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

# Values a field may carry. Nested dicts and lists hold the same kinds.
FieldValue = str | int | float | bool | None | dict[str, Any] | list[Any]
Field = tuple[str, FieldValue]


class Severity(IntEnum):
    """Severity of a log entry.

    The integer values are the codes the logging service expects, so a
    severity is written to the payload as-is.
    """

    Debug = 1
    Verbose = 2
    Info = 3
    Warning = 4
    Error = 5
    Critical = 6

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)

    @classmethod
    def parse(cls, text: str) -> "Severity":
        """Parse a severity name such as "info", "Info" or "INFO".

        "warn" is accepted as a short form of "warning".

        Raises:
            ValueError: If the name is not a known severity.
        """
        normalized = text.strip().lower()
        if normalized == "warn":
            normalized = "warning"
        for severity in cls:
            if severity.name.lower() == normalized:
                return severity
        raise ValueError(f"Invalid severity: {text}")


# Alias kept for callers that think in log levels.
LogLevel = Severity


def current_time_millis() -> int:
    """Return the current UTC time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class LogEntry:
    """A structured log entry.

    Attributes:
        severity: Severity of the entry.
        fields: Ordered (key, value) pairs. Keys may repeat.
        timestamp: Milliseconds since the Unix epoch, captured at creation.
    """

    severity: Severity = Severity.Info
    fields: tuple[Field, ...] = ()
    timestamp: int = field(default_factory=current_time_millis)

    def fields_dict(self) -> dict[str, FieldValue]:
        """Return the fields as a dict. The last value wins for repeated keys."""
        return dict(self.fields)

    def __str__(self) -> str:
        pairs = " ".join(f"{key}={value}" for key, value in self.fields)
        return f"{self.timestamp} {self.severity} {pairs}".rstrip()
