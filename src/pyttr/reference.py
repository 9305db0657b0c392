"""Static reference data: office zones and street cog distributions.

The zone table only covers the zones field offices have been seen in.
Unmapped zones resolve to ``"Unknown Location"``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType

from pyttr._constants import UNKNOWN_LOCATION

ZONE_NAMES: Mapping[int, str] = MappingProxyType(
    {
        3100: "Walrus Way",
        3200: "Sleet Street",
        3300: "Polar Place",
        4100: "Alto Avenue",
        4200: "Baritone Boulevard",
        4300: "Tenor Terrace",
        5100: "Elm Street",
        5200: "Maple Street",
        5300: "Oak Street",
        9100: "Lullaby Lane",
        9200: "Pajama Place",
    }
)


def zone_name(zone_id: int) -> str:
    """Street name for a field office zone id."""
    return ZONE_NAMES.get(zone_id, UNKNOWN_LOCATION)


@dataclasses.dataclass(frozen=True)
class CogPercentage:
    """Share of each cog department on a street, in percent."""

    bossbot: int
    lawbot: int
    cashbot: int
    sellbot: int

    def as_dict(self) -> dict[str, int]:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class Street:
    name: str
    cog_percentages: CogPercentage


@dataclasses.dataclass(frozen=True)
class Neighborhood:
    name: str
    streets: tuple[Street, ...]


def _street(name: str, bossbot: int, lawbot: int, cashbot: int, sellbot: int) -> Street:
    return Street(name, CogPercentage(bossbot=bossbot, lawbot=lawbot, cashbot=cashbot, sellbot=sellbot))


# Confirmed in-game.
NEIGHBORHOODS: tuple[Neighborhood, ...] = (
    Neighborhood(
        "Toontown Central",
        (
            _street("Punchline Place", 10, 10, 40, 40),
            _street("Silly Street", 25, 25, 25, 25),
            _street("Loopy Lane", 10, 70, 10, 10),
        ),
    ),
    Neighborhood(
        "Donald's Dock",
        (
            _street("Barnacle Boulevard", 90, 10, 0, 0),
            _street("Seaweed Street", 0, 0, 90, 10),
            _street("Lighthouse Lane", 40, 40, 10, 10),
        ),
    ),
    Neighborhood(
        "Daisy Gardens",
        (
            _street("Elm Street", 0, 20, 10, 70),
            _street("Maple Street", 10, 70, 0, 20),
            _street("Oak Street", 5, 5, 5, 85),
        ),
    ),
    Neighborhood(
        "Minnie's Melodyland",
        (
            _street("Alto Avenue", 0, 0, 50, 50),
            _street("Baritone Boulevard", 0, 0, 90, 10),
            _street("Tenor Terrace", 50, 50, 0, 0),
        ),
    ),
    Neighborhood(
        "The Brrgh",
        (
            _street("Walrus Way", 90, 10, 0, 0),
            _street("Sleet Street", 10, 20, 30, 40),
            _street("Polar Place", 5, 85, 5, 5),
        ),
    ),
    Neighborhood(
        "Donald's Dreamland",
        (
            _street("Lullaby Lane", 25, 25, 25, 25),
            _street("Pajama Place", 5, 5, 85, 5),
        ),
    ),
)


def find_street(name: str) -> Street | None:
    """Look up a street by its exact name."""
    for neighborhood in NEIGHBORHOODS:
        for street in neighborhood.streets:
            if street.name == name:
                return street
    return None


def neighborhood_of(street_name: str) -> Neighborhood | None:
    """Neighborhood a street belongs to, if it is in the table."""
    for neighborhood in NEIGHBORHOODS:
        if any(street.name == street_name for street in neighborhood.streets):
            return neighborhood
    return None
