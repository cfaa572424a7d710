"""BDD step definitions for the flush feature."""

import asyncio
import json
from dataclasses import dataclass, field

import httpx
import pytest
from pytest_bdd import given, parsers, then, when

from shiplog.adapters.loggers.coralogix import CoralogixConfig, CoralogixLogger
from shiplog.core.errors import LogSendError
from shiplog.core.flush import flush
from shiplog.core.logs import log
from shiplog.core.models import Severity
from shiplog.core.queue import LogQueue


@dataclass
class FlushScenarioContext:
    """Shared state between steps in a flush scenario."""

    queue: LogQueue = field(default_factory=LogQueue)
    status: int = 200
    requests: list[httpx.Request] = field(default_factory=list)
    error: LogSendError | None = None


@pytest.fixture
def ctx() -> FlushScenarioContext:
    """Fresh scenario context for each test."""
    return FlushScenarioContext()


def _request_body(ctx: FlushScenarioContext) -> dict:
    return json.loads(ctx.requests[-1].content)


# === Given ===
@given("an empty log queue")
def step_empty_queue(ctx: FlushScenarioContext) -> None:
    ctx.queue = LogQueue()


@given(parsers.parse("a logging service answering {status:d}"))
def step_service_status(ctx: FlushScenarioContext, status: int) -> None:
    ctx.status = status


# === When ===
@when(
    parsers.parse(
        'an {severity} entry is logged with method "{method}" and status {status:d}'
    )
)
def step_log_request(
    ctx: FlushScenarioContext, severity: str, method: str, status: int
) -> None:
    log(ctx.queue, Severity.parse(severity), method=method, status=status)


@when(parsers.parse('an {severity} entry is logged with message "{message}"'))
def step_log_message(ctx: FlushScenarioContext, severity: str, message: str) -> None:
    log(ctx.queue, Severity.parse(severity), message=message)


@when("the queue is flushed to the remote logger")
def step_flush(ctx: FlushScenarioContext) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        ctx.requests.append(request)
        return httpx.Response(ctx.status)

    config = CoralogixConfig(
        api_key="bdd-key",
        application_name="bdd-app",
        endpoint="https://logs.example.test/api/v1/logs",
    )

    async def run() -> None:
        async with CoralogixLogger(
            config, transport=httpx.MockTransport(handler)
        ) as remote:
            try:
                await flush(ctx.queue, remote)
            except LogSendError as exc:
                ctx.error = exc

    asyncio.run(run())


# === Then ===
@then(parsers.parse("the service received {count:d} request"))
@then(parsers.parse("the service received {count:d} requests"))
def step_request_count(ctx: FlushScenarioContext, count: int) -> None:
    assert len(ctx.requests) == count


@then(parsers.parse('the request holds {count:d} entries with severities "{names}"'))
def step_entry_severities(ctx: FlushScenarioContext, count: int, names: str) -> None:
    entries = _request_body(ctx)["logEntries"]
    expected = [int(Severity.parse(n)) for n in names.split(", ")]
    assert len(entries) == count
    assert [e["severity"] for e in entries] == expected


@then(parsers.parse("entry {index:d} has fields {fields}"))
def step_entry_fields(ctx: FlushScenarioContext, index: int, fields: str) -> None:
    entry = _request_body(ctx)["logEntries"][index - 1]
    assert json.loads(entry["text"]) == json.loads(fields)


@then("the queue is empty")
def step_queue_empty(ctx: FlushScenarioContext) -> None:
    assert ctx.queue.is_empty()


@then(parsers.parse("the flush failed with a delivery error for status {status:d}"))
def step_delivery_error(ctx: FlushScenarioContext, status: int) -> None:
    assert ctx.error is not None
    assert getattr(ctx.error, "status_code", None) == status
