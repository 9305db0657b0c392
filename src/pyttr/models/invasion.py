"""Invasion feed models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, StrictInt, StrictStr

from pyttr.models._base import TtrWireModel, parse_ttr_timestamp


class InvasionDetails(TtrWireModel):
    """One entry of the ``invasions`` map as sent by the API."""

    as_of: StrictInt
    type: StrictStr
    progress: StrictStr


class InvasionsPayload(TtrWireModel):
    """Top-level ``/api/invasions`` response.

    ``error`` is a non-null string when the API serves a degraded response;
    ``invasions`` may then be absent.
    """

    error: StrictStr | None = None
    invasions: dict[str, InvasionDetails] | None = None
    last_updated: StrictInt


def _split_progress(progress: str) -> tuple[int, int] | None:
    defeated, sep, total = progress.partition("/")
    if not sep:
        return None
    try:
        return int(defeated.strip()), int(total.strip())
    except ValueError:
        return None


class InvasionStatus(BaseModel):
    """Normalized invasion on a single street."""

    model_config = ConfigDict(frozen=True)

    as_of: int
    """Epoch seconds at which the server last counted this invasion."""

    enemy_type: str
    """Cog name, e.g. ``"Supervisor"``."""

    progress: str
    """``"<defeated>/<total>"`` as reported by the server."""

    _counts: tuple[int, int] | None = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        self._counts = _split_progress(self.progress)

    @property
    def defeated(self) -> int | None:
        return self._counts[0] if self._counts else None

    @property
    def total(self) -> int | None:
        return self._counts[1] if self._counts else None

    @property
    def remaining(self) -> int | None:
        if self._counts is None:
            return None
        return max(self._counts[1] - self._counts[0], 0)

    @property
    def as_of_datetime(self) -> datetime | None:
        return parse_ttr_timestamp(self.as_of)
