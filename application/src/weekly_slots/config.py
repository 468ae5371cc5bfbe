"""Environment-driven settings for the DynamoDB event store."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_TABLE_NAME = "events"
DEFAULT_REGION = "us-west-2"


@dataclass(frozen=True)
class Settings:
    events_table_name: str = DEFAULT_TABLE_NAME
    aws_region: str = DEFAULT_REGION
    # Set for DynamoDB Local, e.g. http://localhost:8000
    dynamodb_endpoint_url: str | None = None


def _env(name: str, default: str | None = None) -> str | None:
    value = (os.getenv(name) or "").strip()
    return value or default


def load_settings(dotenv_path: str | None = None) -> Settings:
    # Real environment wins over .env; dotenv_path allows overriding in tests.
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return Settings(
        events_table_name=_env("EVENTS_TABLE_NAME", DEFAULT_TABLE_NAME),
        aws_region=_env("AWS_REGION", DEFAULT_REGION),
        dynamodb_endpoint_url=_env("DYNAMODB_ENDPOINT_URL"),
    )
