"""Port interfaces for loggers and queues.

These protocols define the contracts that logger backends and entry sinks
must implement. The core depends only on these interfaces, not on any
concrete backend.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from shiplog.core.models import LogEntry

DEFAULT_SUBSYSTEM = "http"


@runtime_checkable
class LoggerPort(Protocol):
    """Port for delivering a batch of log entries.

    Adapters implementing this protocol accept a whole batch and make one
    best-effort attempt to deliver it.
    Examples: ConsoleLogger, SilentLogger, CoralogixLogger.
    """

    async def send(
        self, entries: Sequence[LogEntry], subsystem: str = DEFAULT_SUBSYSTEM
    ) -> None:
        """Deliver entries as one batch.

        Args:
            entries: Entries to deliver, in order. Treated as read-only and
                     not retained after the call returns.
            subsystem: Name of the emitting component, used by services
                       that group logs by subsystem.

        Raises:
            LogSendError: If delivery failed. An empty batch never fails.
        """
        ...


@runtime_checkable
class AppendsLog(Protocol):
    """Anything that log entries can be appended to, such as a LogQueue."""

    def log(self, entry: LogEntry) -> None:
        """Append an entry."""
        ...


@runtime_checkable
class ClosableLoggerPort(LoggerPort, Protocol):
    """A LoggerPort that holds resources released by aclose()."""

    async def aclose(self) -> None:
        """Release connections or other resources. Safe to call when idle."""
        ...
