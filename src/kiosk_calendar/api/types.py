"""Argument shapes accepted by the registered layout functions."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List

from pydantic import Field
from pydantic.json_schema import WithJsonSchema

from .models import EventPayload

DayString = Annotated[
    str,
    Field(pattern=r"^\d{4}-\d{2}-\d{2}$", description="Local calendar day, YYYY-MM-DD."),
]

Timestamp = Annotated[
    str,
    Field(description="ISO-8601 timestamp. A trailing Z means UTC; naive values use the configured timezone."),
]

EventRecords = Annotated[
    List[Dict[str, Any]],
    WithJsonSchema(
        {
            "type": "array",
            "description": "Event records using the camelCase event contract.",
            "items": EventPayload.model_json_schema(by_alias=True),
        }
    ),
]

DayStrings = Annotated[List[DayString], Field(description="Days to bucket, in display order.")]
