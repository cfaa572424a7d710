"""Shared test fixtures for all test modules."""

from collections.abc import AsyncGenerator, Callable
from dataclasses import dataclass, field

import httpx
import pytest

from shiplog.adapters.loggers.coralogix import CoralogixConfig, CoralogixLogger
from shiplog.core.models import LogEntry, Severity

TEST_ENDPOINT = "https://logs.example.test/api/v1/logs"


@dataclass
class RecordingTransport:
    """httpx.MockTransport wrapper that records every request it serves.

    The response is built by ``responder``; the default answers 200 OK.
    """

    responder: Callable[[httpx.Request], httpx.Response] = field(
        default=lambda request: httpx.Response(200, json={"ok": True})
    )
    requests: list[httpx.Request] = field(default_factory=list)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture
def coralogix_config() -> CoralogixConfig:
    """Provide a config pointing at a test endpoint."""
    return CoralogixConfig(
        api_key="test-private-key",
        application_name="test-app",
        endpoint=TEST_ENDPOINT,
    )


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """Provide a transport answering 200 OK and recording requests."""
    return RecordingTransport()


@pytest.fixture
def make_remote_logger(
    coralogix_config: CoralogixConfig,
) -> Callable[[RecordingTransport | httpx.AsyncBaseTransport], CoralogixLogger]:
    """Factory fixture building a CoralogixLogger over a given transport.

    Usage:
        async def test_something(make_remote_logger, recording_transport):
            remote = make_remote_logger(recording_transport)
            await remote.send(entries)
    """

    def _make(
        transport: RecordingTransport | httpx.AsyncBaseTransport,
    ) -> CoralogixLogger:
        if isinstance(transport, RecordingTransport):
            transport = transport.transport
        return CoralogixLogger(coralogix_config, transport=transport)

    return _make


@pytest.fixture
async def remote_logger(
    make_remote_logger, recording_transport: RecordingTransport
) -> AsyncGenerator[CoralogixLogger]:
    """CoralogixLogger wired to the recording transport, closed afterwards."""
    remote = make_remote_logger(recording_transport)
    yield remote
    await remote.aclose()


@pytest.fixture
def sample_entries() -> list[LogEntry]:
    """Two entries with fixed timestamps: an Info request and an Error."""
    return [
        LogEntry(
            severity=Severity.Info,
            fields=(("method", "GET"), ("status", 200)),
            timestamp=1702300000000,
        ),
        LogEntry(
            severity=Severity.Error,
            fields=(("message", "boom"),),
            timestamp=1702300000500,
        ),
    ]
