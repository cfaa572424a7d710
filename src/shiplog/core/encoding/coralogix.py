"""JSON encoder for the Coralogix log ingestion payload."""

import json
from collections.abc import Iterable, Sequence
from typing import Any

from shiplog.core.errors import SerializationError
from shiplog.core.models import Field, LogEntry

# Field keys the service knows about and shows as their own columns.
# Everything else is packed into the entry's "text".
_ENTRY_ATTRIBUTES = {
    "category": "category",
    "class_name": "className",
    "method_name": "methodName",
    "thread_id": "threadId",
}


def encode_fields(fields: Iterable[Field]) -> str:
    """Encode fields as a JSON object string, keeping order and repeated keys.

    Raises:
        TypeError: If a key is not a string or a value cannot be
                   represented in JSON.
        ValueError: If a float value is NaN or infinite.
    """
    members = []
    for key, value in fields:
        if not isinstance(key, str):
            raise TypeError(f"field key must be str, got {type(key).__name__}")
        members.append(f"{json.dumps(key)}:{json.dumps(value, allow_nan=False)}")
    return "{" + ",".join(members) + "}"


def encode_entry(entry: LogEntry) -> dict[str, Any]:
    """Build the service's representation of one log entry.

    The first non-null value of each known key becomes an entry attribute;
    repeats and nulls stay in the text.
    """
    obj: dict[str, Any] = {
        "timestamp": entry.timestamp,
        "severity": int(entry.severity),
    }
    text_fields: list[Field] = []
    for key, value in entry.fields:
        attribute = _ENTRY_ATTRIBUTES.get(key) if isinstance(key, str) else None
        if attribute is not None and value is not None and attribute not in obj:
            obj[attribute] = str(value)
        else:
            text_fields.append((key, value))
    obj["text"] = encode_fields(text_fields)
    return obj


def build_payload(
    entries: Iterable[LogEntry],
    *,
    private_key: str,
    application_name: str,
    subsystem_name: str,
) -> dict[str, Any]:
    """Build the request payload for a batch of entries."""
    return {
        "privateKey": private_key,
        "applicationName": application_name,
        "subsystemName": subsystem_name,
        "logEntries": [encode_entry(entry) for entry in entries],
    }


def encode_payload(
    entries: Sequence[LogEntry],
    *,
    private_key: str,
    application_name: str,
    subsystem_name: str,
) -> bytes:
    """Encode a batch of entries into the JSON request body.

    Raises:
        SerializationError: If any field value cannot be encoded.
    """
    try:
        payload = build_payload(
            entries,
            private_key=private_key,
            application_name=application_name,
            subsystem_name=subsystem_name,
        )
        return json.dumps(payload, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"error serializing log entries: {exc}") from exc
