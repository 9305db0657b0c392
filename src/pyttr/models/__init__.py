"""Data models for TTR API responses and normalized feed state."""

from pyttr.models._base import TtrWireModel, parse_ttr_timestamp
from pyttr.models.field_office import FieldOfficeDetails, FieldOfficesPayload, FieldOfficeStatus
from pyttr.models.invasion import InvasionDetails, InvasionsPayload, InvasionStatus
from pyttr.models.snapshot import FeedSnapshot

__all__ = [
    "FeedSnapshot",
    "FieldOfficeDetails",
    "FieldOfficeStatus",
    "FieldOfficesPayload",
    "InvasionDetails",
    "InvasionStatus",
    "InvasionsPayload",
    "TtrWireModel",
    "parse_ttr_timestamp",
]
