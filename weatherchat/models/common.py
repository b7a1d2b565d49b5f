"""Common types and helpers shared across models."""

import uuid
from datetime import UTC, datetime
from typing import TypeAlias

MessageId: TypeAlias = str


def utc_now() -> datetime:
    return datetime.now(UTC)


def new_message_id() -> MessageId:
    return uuid.uuid4().hex
