# app/schemas/base.py
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel


def _to_iso_utc(value: datetime) -> str:
    """Naive UTC datetime -> '2025-09-25T08:00:00.000Z' (millisecond precision)."""
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


Timestamp = Annotated[datetime, PlainSerializer(_to_iso_utc, return_type=str, when_used="json")]


class ApiModel(BaseModel):
    """Response models: built from ORM rows, emitted with camelCase keys."""

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
