"""Logger that ships batches to the Coralogix HTTP ingestion API.

Each send is one JSON POST carrying the whole batch. Failures are raised to
the caller as LogSendError subclasses; nothing is retried or logged in
their place.
"""

import asyncio
import logging
import os
import threading
import weakref
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import TracebackType

import httpx

from shiplog.core.encoding.coralogix import encode_payload
from shiplog.core.errors import DeliveryError, TransportError
from shiplog.core.models import LogEntry
from shiplog.core.ports import DEFAULT_SUBSYSTEM
from shiplog.version import USER_AGENT

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.coralogix.com/api/v1/logs"

# Longest response body excerpt carried by a DeliveryError.
BODY_EXCERPT_LIMIT = 512

# Header the service reads the private key from.
API_KEY_HEADER = "private_key"


@dataclass(frozen=True)
class CoralogixConfig:
    """Configuration for CoralogixLogger.

    Attributes:
        api_key: Private key issued by the service.
        application_name: Application dimension attached to every batch.
        endpoint: Ingestion URL.
    """

    api_key: str = field(repr=False)
    application_name: str
    endpoint: str = DEFAULT_ENDPOINT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CoralogixConfig":
        """Load configuration from environment variables.

        Reads SHIPLOG_API_KEY and SHIPLOG_APPLICATION_NAME, and
        SHIPLOG_ENDPOINT if set.

        Raises:
            ValueError: If a required variable is missing or empty.
        """
        env = os.environ if environ is None else environ
        values = {}
        for name in ("SHIPLOG_API_KEY", "SHIPLOG_APPLICATION_NAME"):
            value = env.get(name, "")
            if not value:
                raise ValueError(f"environment variable {name} is not set")
            values[name] = value
        return cls(
            api_key=values["SHIPLOG_API_KEY"],
            application_name=values["SHIPLOG_APPLICATION_NAME"],
            endpoint=env.get("SHIPLOG_ENDPOINT") or DEFAULT_ENDPOINT,
        )


def _validate(config: CoralogixConfig) -> None:
    """Check the endpoint is an http(s) URL and the key fits in a header."""
    if not config.endpoint:
        raise ValueError("endpoint must not be empty")
    try:
        url = httpx.URL(config.endpoint)
    except httpx.InvalidURL as exc:
        raise ValueError(f"invalid endpoint URL: {config.endpoint!r}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(f"endpoint must be an absolute http(s) URL: {config.endpoint!r}")

    if not config.api_key:
        raise ValueError("api_key must not be empty")
    if not config.api_key.isascii() or any(c in config.api_key for c in "\r\n\0"):
        raise ValueError("api_key is not a valid HTTP header value")


def _excerpt(response: httpx.Response) -> str:
    try:
        body = response.text
    except UnicodeDecodeError:
        body = response.content.decode("utf-8", errors="replace")
    return body[:BODY_EXCERPT_LIMIT]


class CoralogixLogger:
    """Coralogix implementation of LoggerPort.

    An httpx.AsyncClient's connection pool belongs to the event loop that
    first used it, so the logger keeps one client per running loop. Sends
    on the same loop reuse connections; sends from other threads or later
    asyncio.run calls get their own client. Configuration is read-only after
    construction and the logger can be shared by any number of concurrent
    sends.

    Example:
        ```python
        config = CoralogixConfig(api_key=key, application_name="billing")
        async with CoralogixLogger(config) as remote:
            await flush(queue, remote)
        ```
    """

    def __init__(
        self,
        config: CoralogixConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the logger. Performs no network I/O.

        Args:
            config: Service configuration.
            transport: Optional httpx transport, e.g. httpx.MockTransport
                       in tests. It is shared by the clients of every loop.

        Raises:
            ValueError: If the endpoint or api key is unusable.
        """
        _validate(config)
        self._config = config
        self._transport = transport
        self._headers = {
            API_KEY_HEADER: config.api_key,
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
        }
        self._clients: weakref.WeakKeyDictionary[
            asyncio.AbstractEventLoop, httpx.AsyncClient
        ] = weakref.WeakKeyDictionary()
        self._clients_lock = threading.Lock()

    @classmethod
    def init(cls, config: CoralogixConfig) -> "CoralogixLogger":
        """Create a logger from configuration."""
        return cls(config)

    @property
    def config(self) -> CoralogixConfig:
        return self._config

    def _forget_closed_loops(self) -> None:
        # Caller holds _clients_lock.
        for loop in [lp for lp in self._clients if lp.is_closed()]:
            del self._clients[loop]

    def _client(self) -> httpx.AsyncClient:
        """Return the client for the running loop, creating it on first use."""
        loop = asyncio.get_running_loop()
        with self._clients_lock:
            client = self._clients.get(loop)
            if client is None or client.is_closed:
                self._forget_closed_loops()
                client = httpx.AsyncClient(
                    transport=self._transport,
                    headers=self._headers,
                    follow_redirects=True,
                )
                self._clients[loop] = client
            return client

    async def send(
        self, entries: Sequence[LogEntry], subsystem: str = DEFAULT_SUBSYSTEM
    ) -> None:
        """Send entries to the service in a single POST.

        Redirects are followed; only the final status is checked.

        Raises:
            SerializationError: If the batch could not be encoded.
            TransportError: If the request could not be completed.
            DeliveryError: If the service returned a non-success status.
        """
        if not entries:
            logger.debug("Skipping send of empty batch")
            return

        body = encode_payload(
            entries,
            private_key=self._config.api_key,
            application_name=self._config.application_name,
            subsystem_name=subsystem,
        )
        logger.debug(
            "Sending %d log entries to %s", len(entries), self._config.endpoint
        )
        try:
            response = await self._client().post(self._config.endpoint, content=body)
        except httpx.RequestError as exc:
            raise TransportError(
                f"error sending logs to {self._config.endpoint}: {exc}"
            ) from exc

        # Instead of raise_for_status, keep the body for diagnostics.
        if not response.is_success:
            raise DeliveryError(response.status_code, _excerpt(response))

    async def aclose(self) -> None:
        """Close the connection pool of the running loop.

        Clients left behind by loops that have already finished are dropped;
        their connections went away with the loop.
        """
        loop = asyncio.get_running_loop()
        with self._clients_lock:
            client = self._clients.pop(loop, None)
            self._forget_closed_loops()
        if client is not None:
            await client.aclose()

    async def __aenter__(self) -> "CoralogixLogger":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()
