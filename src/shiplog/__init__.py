"""shiplog: queue structured log entries and ship them in batches."""

from shiplog.adapters.loggers import (
    CONSOLE_SUPPORTED,
    ConsoleLogger,
    CoralogixConfig,
    CoralogixLogger,
    SilentLogger,
    select_logger,
)
from shiplog.adapters.logging import LogQueueHandler
from shiplog.core.errors import (
    DeliveryError,
    LogSendError,
    SerializationError,
    TransportError,
)
from shiplog.core.flush import flush, send_logs
from shiplog.core.logs import critical, debug, entry, error, info, log, warn
from shiplog.core.models import LogEntry, LogLevel, Severity
from shiplog.core.ports import AppendsLog, ClosableLoggerPort, LoggerPort
from shiplog.core.queue import LogQueue, SynchronizedLogQueue
from shiplog.version import USER_AGENT, __version__

__all__ = [
    "CONSOLE_SUPPORTED",
    "USER_AGENT",
    "AppendsLog",
    "ClosableLoggerPort",
    "ConsoleLogger",
    "CoralogixConfig",
    "CoralogixLogger",
    "DeliveryError",
    "LogEntry",
    "LogLevel",
    "LogQueue",
    "LogQueueHandler",
    "LogSendError",
    "LoggerPort",
    "SerializationError",
    "Severity",
    "SilentLogger",
    "SynchronizedLogQueue",
    "TransportError",
    "__version__",
    "critical",
    "debug",
    "entry",
    "error",
    "flush",
    "info",
    "log",
    "select_logger",
    "send_logs",
    "warn",
]
