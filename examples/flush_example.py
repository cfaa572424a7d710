"""Example of per-request log queues flushed to a logger.

Run with:
    python examples/flush_example.py

Backend selection:
    With SHIPLOG_API_KEY and SHIPLOG_APPLICATION_NAME set, entries are shipped
    to Coralogix (or SHIPLOG_ENDPOINT). Without them, entries are printed to
    the console.

Each simulated request owns its own LogQueue, so no locking is needed. Entries
from the standard logging module are collected too, via LogQueueHandler.
"""

import asyncio
import logging
import random

from shiplog import (
    CoralogixConfig,
    LoggerPort,
    LogQueue,
    LogQueueHandler,
    LogSendError,
    Severity,
    flush,
    log,
    select_logger,
)


async def handle_request(path: str, logger_port: LoggerPort) -> None:
    """Simulate one request, logging into a queue owned by this request."""
    queue = LogQueue()
    handler = LogQueueHandler(queue, context_provider=lambda: {"path": path})
    app_logger = logging.getLogger(f"example.{path.strip('/') or 'root'}")
    app_logger.addHandler(handler)
    app_logger.setLevel(logging.INFO)

    try:
        await asyncio.sleep(random.uniform(0.001, 0.01))
        status = random.choice([200, 200, 200, 500])
        log(queue, Severity.Info, method="GET", url=path, status=status)
        if status >= 500:
            app_logger.error("request failed")
    finally:
        app_logger.removeHandler(handler)

    try:
        await flush(queue, logger_port, subsystem="example")
    except LogSendError as exc:
        # Drop the batch; a real service might keep it for the next flush.
        print(f"could not ship logs for {path}: {exc}")


async def main() -> None:
    try:
        config = CoralogixConfig.from_env()
    except ValueError:
        config = None
    logger_port = select_logger(config)

    await asyncio.gather(
        *(handle_request(path, logger_port) for path in ["/", "/users", "/orders"])
    )

    await logger_port.aclose()


if __name__ == "__main__":
    asyncio.run(main())
