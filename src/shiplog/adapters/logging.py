"""Python logging handler adapter for shiplog.

This adapter bridges Python's standard library logging module to a LogQueue,
so records from existing loggers are shipped with the next flush.
"""

import logging
import traceback
from collections.abc import Callable

from shiplog.core.models import FieldValue, LogEntry, Severity
from shiplog.core.ports import AppendsLog

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# Callable returning fields merged into every entry, e.g. request context
ContextProvider = Callable[[], dict[str, FieldValue]]

# Default fields to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["category", "method_name", "lineno"]

# Lowest stdlib level mapped to each severity, highest first
_LEVEL_THRESHOLDS = (
    (logging.CRITICAL, Severity.Critical),
    (logging.ERROR, Severity.Error),
    (logging.WARNING, Severity.Warning),
    (logging.INFO, Severity.Info),
)


def severity_for_level(levelno: int) -> Severity:
    """Map a stdlib logging level number to a Severity."""
    for threshold, severity in _LEVEL_THRESHOLDS:
        if levelno >= threshold:
            return severity
    return Severity.Debug


class LogQueueHandler(logging.Handler):
    """Logging handler that appends log records to a LogQueue.

    Example:
        ```python
        from shiplog import LogQueue, LogQueueHandler

        queue = LogQueue()
        handler = LogQueueHandler(queue)
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        queue: AppendsLog,
        include_attrs: list[str] | None = None,
        context_provider: ContextProvider | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with a queue.

        Args:
            queue: Queue (or anything with log(entry)) receiving entries.
            include_attrs: Fields taken from the LogRecord. Defaults to
                ["category", "method_name", "lineno"]. "thread_id" and
                "pathname" are also available.
            context_provider: Called on every emit; its fields come before
                extra= fields, which override them.
            level: Minimum level handled.
        """
        super().__init__(level)
        self._queue = queue
        self._include_attrs = (
            _DEFAULT_INCLUDE_ATTRS if include_attrs is None else include_attrs
        )
        self._context_provider = context_provider

    def emit(self, record: logging.LogRecord) -> None:
        """Append a log record to the queue.

        Args:
            record: The log record to emit.
        """
        # Map of field names to their values from LogRecord
        attr_mapping: dict[str, FieldValue] = {
            "category": record.name,
            "method_name": record.funcName or "",
            "lineno": record.lineno,
            "thread_id": record.threadName or "",
            "pathname": record.pathname,
        }

        fields: list[tuple[str, FieldValue]] = [("message", record.getMessage())]
        fields.extend(
            (key, attr_mapping[key])
            for key in self._include_attrs
            if key in attr_mapping
        )

        extra: dict[str, FieldValue] = {}
        if self._context_provider is not None:
            extra.update(self._context_provider())

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                extra[key] = value
        fields.extend(extra.items())

        # Extract exception info if present
        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                fields.append(("exc_type", exc_type.__name__))
            if exc_value is not None:
                fields.append(("exc_message", str(exc_value)))
            if exc_tb is not None:
                fields.append(
                    (
                        "exc_traceback",
                        "".join(
                            traceback.format_exception(exc_type, exc_value, exc_tb)
                        ),
                    )
                )

        self._queue.log(
            LogEntry(
                severity=severity_for_level(record.levelno),
                fields=tuple(fields),
                timestamp=int(record.created * 1000),
            )
        )
