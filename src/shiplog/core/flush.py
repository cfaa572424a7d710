"""Flush helpers connecting a LogQueue to a logger."""

import logging
from collections.abc import Sequence

from shiplog.core.models import LogEntry
from shiplog.core.ports import DEFAULT_SUBSYSTEM, LoggerPort
from shiplog.core.queue import LogQueue, SynchronizedLogQueue

logger = logging.getLogger(__name__)


async def send_logs(
    entries: Sequence[LogEntry],
    logger_port: LoggerPort,
    subsystem: str = DEFAULT_SUBSYSTEM,
) -> None:
    """Send entries to a logger, skipping the call for an empty batch.

    Raises:
        LogSendError: Whatever the logger raises. Nothing is retried.
    """
    if entries:
        await logger_port.send(entries, subsystem)


async def flush(
    queue: LogQueue | SynchronizedLogQueue,
    logger_port: LoggerPort,
    subsystem: str = DEFAULT_SUBSYSTEM,
) -> int:
    """Drain a queue and send its entries as one batch.

    The queue is emptied before sending; if the send fails the batch is not
    put back, and the error propagates to the caller.

    Returns:
        Number of entries sent.
    """
    entries = queue.drain()
    logger.debug("Flushing %d log entries (subsystem=%s)", len(entries), subsystem)
    await send_logs(entries, logger_port, subsystem)
    return len(entries)
