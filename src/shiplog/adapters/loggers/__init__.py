"""Logger backends implementing LoggerPort."""

from shiplog.adapters.loggers.console import CONSOLE_SUPPORTED, ConsoleLogger
from shiplog.adapters.loggers.coralogix import CoralogixConfig, CoralogixLogger
from shiplog.adapters.loggers.silent import SilentLogger
from shiplog.core.ports import ClosableLoggerPort


def select_logger(config: CoralogixConfig | None = None) -> ClosableLoggerPort:
    """Pick a backend for the current environment.

    Returns a CoralogixLogger when a config is given. Otherwise returns a
    ConsoleLogger where standard output exists and a SilentLogger elsewhere.
    """
    if config is not None:
        return CoralogixLogger(config)
    if CONSOLE_SUPPORTED:
        return ConsoleLogger()
    return SilentLogger()


__all__ = [
    "CONSOLE_SUPPORTED",
    "ConsoleLogger",
    "CoralogixConfig",
    "CoralogixLogger",
    "SilentLogger",
    "select_logger",
]
