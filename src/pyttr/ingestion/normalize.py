"""Normalization of decoded wire payloads into feed snapshots.

Both normalizers are pure: no I/O, and either every entry normalizes or
the whole payload is rejected with :class:`TtrDecodeError`.
"""

from __future__ import annotations

import re

from pyttr._constants import FIELD_OFFICES_ENDPOINT
from pyttr.exceptions import DecodeErrorKind, TtrDecodeError
from pyttr.models.field_office import FieldOfficesPayload, FieldOfficeStatus
from pyttr.models.invasion import InvasionsPayload, InvasionStatus
from pyttr.models.snapshot import FeedSnapshot
from pyttr.reference import zone_name

InvasionSnapshot = FeedSnapshot[str, InvasionStatus]
FieldOfficeSnapshot = FeedSnapshot[int, FieldOfficeStatus]

_ZONE_ID_RE = re.compile(r"-?[0-9]+")


def parse_zone_id(key: str) -> int | None:
    """Zone ids arrive as map keys; ``None`` when a key is not an integer."""
    text = key.strip()
    if not _ZONE_ID_RE.fullmatch(text):
        return None
    return int(text)


def normalize_invasions(payload: InvasionsPayload) -> InvasionSnapshot:
    """Map an invasions payload to a snapshot keyed by street name.

    A degraded response (``error`` set) yields an empty map and carries the
    error message as ``fetch_error``.
    """
    if payload.error is not None:
        return InvasionSnapshot(
            items_by_location={},
            last_updated=payload.last_updated,
            fetch_error=payload.error,
        )

    items = {
        street: InvasionStatus(
            as_of=details.as_of,
            enemy_type=details.type,
            progress=details.progress,
        )
        for street, details in (payload.invasions or {}).items()
    }
    return InvasionSnapshot(items_by_location=items, last_updated=payload.last_updated)


def normalize_field_offices(payload: FieldOfficesPayload) -> FieldOfficeSnapshot:
    """Map a field offices payload to a snapshot keyed by numeric zone id."""
    items: dict[int, FieldOfficeStatus] = {}
    for key, details in payload.field_offices.items():
        zone_id = parse_zone_id(key)
        if zone_id is None:
            raise TtrDecodeError(
                f"Field office key is not a zone id: {key!r}",
                kind=DecodeErrorKind.SCHEMA_MISMATCH,
                field=f"fieldOffices.{key}",
                endpoint=FIELD_OFFICES_ENDPOINT,
            )
        items[zone_id] = FieldOfficeStatus(
            zone_id=zone_id,
            location_name=zone_name(zone_id),
            department=details.department,
            difficulty=details.difficulty,
            annexes_remaining=details.annexes,
            is_open=details.open,
        )
    return FieldOfficeSnapshot(items_by_location=items, last_updated=payload.last_updated)
