"""Logger that discards everything."""

from collections.abc import Sequence

from shiplog.core.models import LogEntry
from shiplog.core.ports import DEFAULT_SUBSYSTEM


class SilentLogger:
    """No-op implementation of LoggerPort.

    Swap it in to turn logging off without touching call sites.
    """

    @classmethod
    def init(cls) -> "SilentLogger":
        return cls()

    async def send(
        self, entries: Sequence[LogEntry], subsystem: str = DEFAULT_SUBSYSTEM
    ) -> None:
        """Discard entries."""
        return None

    async def aclose(self) -> None:
        """Nothing to release."""
        return None
