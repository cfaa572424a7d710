"""Logger that prints entries to standard output."""

import sys
from collections.abc import Sequence
from typing import TextIO

from shiplog.core.encoding.text import format_entry
from shiplog.core.models import LogEntry
from shiplog.core.ports import DEFAULT_SUBSYSTEM

# Sandboxed interpreters (Pyodide in the browser, WASI runtimes) have no
# usable standard output. Decided once, at import.
CONSOLE_SUPPORTED = sys.platform not in ("emscripten", "wasi")


class ConsoleLogger:
    """Console implementation of LoggerPort.

    Writes one line per entry, in batch order. Meant for tests and local
    development, not as a production sink: write errors are dropped and
    send never fails.

    Args:
        stream: Text stream to write to. Defaults to the current sys.stdout,
                looked up on every send.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @classmethod
    def init(cls, stream: TextIO | None = None) -> "ConsoleLogger":
        """Create a console logger.

        Raises:
            RuntimeError: If the platform has no standard output.
        """
        if not CONSOLE_SUPPORTED:
            raise RuntimeError(f"ConsoleLogger is not available on {sys.platform}")
        return cls(stream)

    async def send(
        self, entries: Sequence[LogEntry], subsystem: str = DEFAULT_SUBSYSTEM
    ) -> None:
        """Write entries to the stream, one line each."""
        if not entries:
            return
        stream = self._stream if self._stream is not None else sys.stdout
        # sys.stdout is None under pythonw and some embedded interpreters.
        if stream is None:
            return
        lines = [format_entry(entry, subsystem) + "\n" for entry in entries]
        try:
            for line in lines:
                stream.write(line)
            stream.flush()
        except (OSError, ValueError):
            # Closed or broken stream; console output is best effort.
            return

    async def aclose(self) -> None:
        """Nothing to release; the stream is not owned by the logger."""
        return None
