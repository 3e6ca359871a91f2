"""Shared base model for ledger entities."""

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Generate an opaque unique identifier."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)


class LedgerModel(BaseModel):
    """
    Base for persisted entities.

    Fields serialize with camelCase aliases (the snapshot format) and accept
    either snake_case or camelCase names on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
