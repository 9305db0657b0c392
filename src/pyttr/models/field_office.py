"""Field office feed models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from pyttr._constants import MAX_DIFFICULTY, MIN_DIFFICULTY
from pyttr.display import difficulty_to_stars
from pyttr.models._base import TtrWireModel


class FieldOfficeDetails(TtrWireModel):
    """One entry of the ``fieldOffices`` map as sent by the API."""

    department: StrictStr
    difficulty: StrictInt = Field(ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY)
    annexes: StrictInt
    open: StrictBool


class FieldOfficesPayload(TtrWireModel):
    """Top-level ``/api/fieldoffices`` response, keyed by zone id string."""

    field_offices: dict[str, FieldOfficeDetails]
    last_updated: StrictInt


class FieldOfficeStatus(BaseModel):
    """Normalized field office in a single zone.

    Parameters
    ----------
    zone_id : int
        Numeric zone id the office sits in.
    location_name : str
        Street name for ``zone_id``, or ``"Unknown Location"``.
    department : str
        Cog department running the office (API letter code, e.g. ``"s"``).
    difficulty : int
        0-based difficulty (0..4).
    annexes_remaining : int
        Annexes still standing.
    is_open : bool
        Whether toons can still enter.
    """

    model_config = ConfigDict(frozen=True)

    zone_id: int
    location_name: str
    department: str
    difficulty: int = Field(ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY)
    annexes_remaining: int
    is_open: bool

    @property
    def stars(self) -> int:
        return difficulty_to_stars(self.difficulty)
