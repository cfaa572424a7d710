"""Queues holding log entries until they are flushed to a logger."""

import threading
from collections.abc import Iterator

from shiplog.core.models import LogEntry


class LogQueue:
    """Ordered buffer of log entries waiting to be sent.

    A queue owns its entries from append until drain. It is not tied to any
    logger and does no locking: create one queue per unit of work (for
    example one request handler) rather than sharing it between threads.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []

    def append(self, entry: LogEntry) -> None:
        """Append an entry at the tail of the queue."""
        self._entries.append(entry)

    # Lets a queue be the target of the record builders in core.logs.
    log = append

    def drain(self) -> list[LogEntry]:
        """Return all queued entries in insertion order, emptying the queue."""
        entries, self._entries = self._entries, []
        return entries

    def is_empty(self) -> bool:
        """Return True if there are no entries to send."""
        return not self._entries

    def clear(self) -> None:
        """Discard all queued entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(tuple(self._entries))

    def __str__(self) -> str:
        return "\n".join(str(entry) for entry in self._entries)

    def __repr__(self) -> str:
        return f"LogQueue(entries={len(self._entries)})"


class SynchronizedLogQueue:
    """A LogQueue guarded by a lock, for queues shared between threads.

    Only needed when one queue really must be shared; a queue per unit of
    work avoids locking altogether.
    """

    def __init__(self, queue: LogQueue | None = None) -> None:
        self._queue = queue if queue is not None else LogQueue()
        self._lock = threading.Lock()

    def append(self, entry: LogEntry) -> None:
        """Append an entry at the tail of the queue."""
        with self._lock:
            self._queue.append(entry)

    log = append

    def drain(self) -> list[LogEntry]:
        """Return all queued entries in insertion order, emptying the queue."""
        with self._lock:
            return self._queue.drain()

    def is_empty(self) -> bool:
        with self._lock:
            return self._queue.is_empty()

    def clear(self) -> None:
        with self._lock:
            self._queue.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)
