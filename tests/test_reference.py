from __future__ import annotations

from datetime import UTC, timedelta, timezone

import pytest

from pyttr.display import difficulty_to_stars, format_clock_time, format_updated
from pyttr.models.snapshot import FeedSnapshot
from pyttr.reference import NEIGHBORHOODS, ZONE_NAMES, find_street, neighborhood_of, zone_name


def test_zone_name_known_ids() -> None:
    assert zone_name(3100) == "Walrus Way"
    assert zone_name(5300) == "Oak Street"
    assert zone_name(9200) == "Pajama Place"


@pytest.mark.parametrize("zone_id", [9999, 1100, 2100, 5400])
def test_zone_name_unmapped_ids(zone_id: int) -> None:
    assert zone_name(zone_id) == "Unknown Location"


def test_zone_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        ZONE_NAMES[1100] = "Loopy Lane"  # type: ignore[index]


def test_every_street_distribution_sums_to_100() -> None:
    for neighborhood in NEIGHBORHOODS:
        for street in neighborhood.streets:
            assert sum(street.cog_percentages.as_dict().values()) == 100, street.name


def test_find_street_and_neighborhood() -> None:
    street = find_street("Loopy Lane")
    assert street is not None
    assert street.cog_percentages.lawbot == 70

    neighborhood = neighborhood_of("Loopy Lane")
    assert neighborhood is not None
    assert neighborhood.name == "Toontown Central"

    assert find_street("Nowhere Road") is None
    assert neighborhood_of("Nowhere Road") is None


def test_neighborhood_names_match_game_listing() -> None:
    assert [n.name for n in NEIGHBORHOODS] == [
        "Toontown Central",
        "Donald's Dock",
        "Daisy Gardens",
        "Minnie's Melodyland",
        "The Brrgh",
        "Donald's Dreamland",
    ]
    neighborhood = neighborhood_of("Walrus Way")
    assert neighborhood is not None
    assert neighborhood.name == "The Brrgh"


def test_mapped_zones_are_known_streets() -> None:
    for name in ZONE_NAMES.values():
        assert find_street(name) is not None, name


def test_format_clock_time() -> None:
    assert format_clock_time(1700000000, UTC) == "22:13"
    assert format_clock_time(1700000000, timezone(timedelta(hours=-5))) == "17:13"


@pytest.mark.parametrize(("difficulty", "stars"), [(0, 1), (2, 3), (4, 5)])
def test_difficulty_to_stars(difficulty: int, stars: int) -> None:
    assert difficulty_to_stars(difficulty) == stars


def test_format_updated() -> None:
    assert format_updated(FeedSnapshot()) is None
    assert format_updated(FeedSnapshot(last_updated=1700000000), UTC) == "Updated 22:13"
