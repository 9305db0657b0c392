"""Feed snapshot model."""

from __future__ import annotations

import time
from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from pyttr.models._base import parse_ttr_timestamp

KeyT = TypeVar("KeyT")
StatusT = TypeVar("StatusT", bound=BaseModel)


class FeedSnapshot(BaseModel, Generic[KeyT, StatusT]):
    """Full state of a feed at one point in time.

    Snapshots are replaced wholesale; ``items_by_location`` and
    ``last_updated`` always come from the same successful fetch.
    """

    model_config = ConfigDict(frozen=True)

    items_by_location: dict[KeyT, StatusT] = Field(default_factory=dict)
    last_updated: int = 0
    """Feed-level timestamp reported by the server (``0`` before the first fetch)."""

    fetch_error: str | None = None
    """Degraded-response message reported by the server, if any."""

    @property
    def is_empty(self) -> bool:
        return not self.items_by_location and self.last_updated == 0

    @property
    def last_updated_datetime(self) -> datetime | None:
        return parse_ttr_timestamp(self.last_updated)

    def age_seconds(self, now: float | None = None) -> float | None:
        """Seconds between the feed's ``last_updated`` and *now* (epoch seconds)."""
        if self.last_updated <= 0:
            return None
        if now is None:
            now = time.time()
        return now - self.last_updated
