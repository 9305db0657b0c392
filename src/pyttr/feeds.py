"""Definitions of the two status feeds."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any, Generic

from pyttr._constants import FIELD_OFFICES_ENDPOINT, INVASIONS_ENDPOINT
from pyttr.ingestion.decode import decode_field_offices, decode_invasions
from pyttr.ingestion.normalize import (
    FieldOfficeSnapshot,
    InvasionSnapshot,
    normalize_field_offices,
    normalize_invasions,
)
from pyttr.models.field_office import FieldOfficeStatus
from pyttr.models.invasion import InvasionStatus
from pyttr.models.snapshot import FeedSnapshot, KeyT, StatusT


@dataclasses.dataclass(frozen=True)
class FeedDefinition(Generic[KeyT, StatusT]):
    """Everything needed to turn one endpoint into snapshots.

    Parameters
    ----------
    name : str
        Short feed name used in logs and errors.
    endpoint : str
        Path appended to the configured base URL.
    decode : callable
        ``bytes -> wire payload``; raises :class:`TtrDecodeError`.
    normalize : callable
        ``wire payload -> FeedSnapshot``; raises :class:`TtrDecodeError`.
    snapshot_type : type
        Parametrized snapshot class, used to build the initial empty snapshot.
    """

    name: str
    endpoint: str
    decode: Callable[[bytes], Any]
    normalize: Callable[[Any], FeedSnapshot[KeyT, StatusT]]
    snapshot_type: type[FeedSnapshot[KeyT, StatusT]]

    def empty_snapshot(self) -> FeedSnapshot[KeyT, StatusT]:
        return self.snapshot_type()


INVASIONS: FeedDefinition[str, InvasionStatus] = FeedDefinition(
    name="invasions",
    endpoint=INVASIONS_ENDPOINT,
    decode=decode_invasions,
    normalize=normalize_invasions,
    snapshot_type=InvasionSnapshot,
)

FIELD_OFFICES: FeedDefinition[int, FieldOfficeStatus] = FeedDefinition(
    name="field_offices",
    endpoint=FIELD_OFFICES_ENDPOINT,
    decode=decode_field_offices,
    normalize=normalize_field_offices,
    snapshot_type=FieldOfficeSnapshot,
)
