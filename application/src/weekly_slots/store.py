"""DynamoDB event store: the single read the availability calculation makes."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Iterable

import boto3
from boto3.dynamodb.types import TypeDeserializer
from botocore.config import Config

from .config import Settings, load_settings
from .events import Event

logger = logging.getLogger(__name__)

_DESERIALIZER = TypeDeserializer()

# Anything that returns every event starting at or before the given moment.
EventSource = Callable[[datetime], Iterable[Event]]


def _client(settings: Settings):
    kwargs = {"region_name": settings.aws_region}
    if settings.dynamodb_endpoint_url:
        kwargs["endpoint_url"] = settings.dynamodb_endpoint_url
    return boto3.client("dynamodb", config=Config(retries={"mode": "standard", "max_attempts": 3}), **kwargs)


def _from_ddb(item: dict[str, Any]) -> dict[str, Any]:
    """Deserialize a DynamoDB item to plain Python values."""
    return {key: _DESERIALIZER.deserialize(attr) for key, attr in item.items()}


def event_from_item(item: dict[str, Any]) -> Event:
    return Event.from_dict(_from_ddb(item))


def fetch_events_up_to(until: datetime, settings: Settings | None = None) -> list[Event]:
    """
    Return every event (opening or appointment, recurring or not) whose
    starts_at is at or before `until`.

    Timestamps are stored as ISO-8601 strings in one format, so the string
    comparison in the filter orders them chronologically. The scan is a
    strongly consistent read and all pages are consumed before returning, but
    pages are read one after another, so a write landing mid-scan may or may
    not be seen. Client errors propagate unchanged.
    """
    settings = settings or load_settings()
    client = _client(settings)
    paginator = client.get_paginator("scan")
    pages = paginator.paginate(
        TableName=settings.events_table_name,
        FilterExpression="starts_at <= :until",
        ConsistentRead=True,
        ExpressionAttributeValues={":until": {"S": until.isoformat()}},
    )
    events = [event_from_item(item) for page in pages for item in page.get("Items", [])]
    logger.info(
        "Fetched %d events from %s starting at or before %s",
        len(events),
        settings.events_table_name,
        until.isoformat(),
    )
    return events
