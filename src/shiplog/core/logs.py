"""Helper functions for creating LogEntry objects."""

from shiplog.core.models import Field, FieldValue, LogEntry, Severity
from shiplog.core.ports import AppendsLog


def entry(
    severity: Severity,
    *pairs: Field,
    **fields: FieldValue,
) -> LogEntry:
    """Create a log entry with automatic timestamp.

    Positional (key, value) pairs come first, in the order given, followed by
    keyword fields. Pairs allow keys that are not Python identifiers and
    repeated keys.

    Args:
        severity: Severity of the entry
        *pairs: Ordered (key, value) tuples
        **fields: Additional structured fields

    Returns:
        LogEntry with current timestamp

    Raises:
        TypeError: If a pair key is not a string.
    """
    for key, _ in pairs:
        if not isinstance(key, str):
            raise TypeError(f"field key must be str, got {type(key).__name__}")
    return LogEntry(
        severity=severity,
        fields=(*pairs, *fields.items()),
    )


def log(
    queue: AppendsLog,
    severity: Severity,
    *pairs: Field,
    **fields: FieldValue,
) -> LogEntry:
    """Create a log entry and append it to a queue.

    Example:
        ```python
        queue = LogQueue()
        log(queue, Severity.Info, method="GET", url=url, status=200)
        ```

    Returns:
        The entry that was appended
    """
    created = entry(severity, *pairs, **fields)
    queue.log(created)
    return created


def debug(*pairs: Field, **fields: FieldValue) -> LogEntry:
    """Create a Debug log entry with automatic timestamp."""
    return entry(Severity.Debug, *pairs, **fields)


def info(*pairs: Field, **fields: FieldValue) -> LogEntry:
    """Create an Info log entry with automatic timestamp."""
    return entry(Severity.Info, *pairs, **fields)


def warn(*pairs: Field, **fields: FieldValue) -> LogEntry:
    """Create a Warning log entry with automatic timestamp."""
    return entry(Severity.Warning, *pairs, **fields)


def error(*pairs: Field, **fields: FieldValue) -> LogEntry:
    """Create an Error log entry with automatic timestamp."""
    return entry(Severity.Error, *pairs, **fields)


def critical(*pairs: Field, **fields: FieldValue) -> LogEntry:
    """Create a Critical log entry with automatic timestamp."""
    return entry(Severity.Critical, *pairs, **fields)
