"""Base model for TTR API wire payloads.

Every wire model inherits from :class:`TtrWireModel` which provides:

* ``alias_generator=to_camel`` so camelCase API keys map
  automatically to snake_case fields.
* Strict scalar fields (``StrictInt`` etc.) in subclasses, so a wrong JSON
  type (``"4"`` for an int, ``1`` for a bool) is a schema mismatch rather
  than a silent coercion.
* ``extra="ignore"`` so fields the API adds later are tolerated.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def parse_ttr_timestamp(value: Any) -> datetime | None:
    """Convert a TTR epoch timestamp (seconds) to a UTC datetime.

    Returns ``None`` when the value is ``None`` or ``0`` (never updated).
    """
    if value is None:
        return value
    if isinstance(value, datetime):
        return value
    ts = int(value)
    if ts <= 0:
        return None
    return datetime.fromtimestamp(ts, tz=UTC)


class TtrWireModel(BaseModel):
    """Base for TTR API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
