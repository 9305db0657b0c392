"""Decode raw feed bodies into typed wire models."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import ValidationError

from pyttr._constants import FIELD_OFFICES_ENDPOINT, INVASIONS_ENDPOINT
from pyttr.exceptions import DecodeErrorKind, TtrDecodeError
from pyttr.models._base import TtrWireModel
from pyttr.models.field_office import FieldOfficesPayload
from pyttr.models.invasion import InvasionsPayload

_logger = logging.getLogger(__name__)

TWire = TypeVar("TWire", bound=TtrWireModel)


def _error_field(exc: ValidationError) -> str:
    """Dotted wire path of the first validation error (``$`` for the document root)."""
    errors = exc.errors()
    if not errors:
        return "$"
    loc = errors[0].get("loc", ())
    return ".".join(str(part) for part in loc) or "$"


def load_json(raw: bytes, *, endpoint: str = "") -> Any:
    """Parse a response body, raising ``MALFORMED_JSON`` on failure."""
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise TtrDecodeError(
            f"Invalid JSON from {endpoint or 'feed'}: {raw[:64]!r}",
            kind=DecodeErrorKind.MALFORMED_JSON,
            endpoint=endpoint,
        ) from exc


def validate_payload(model: type[TWire], data: Any, *, endpoint: str = "") -> TWire:
    """Validate decoded JSON against a wire model, raising ``SCHEMA_MISMATCH`` on failure."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        field = _error_field(exc)
        _logger.debug("%s schema mismatch at %s: %s", endpoint or model.__name__, field, exc)
        raise TtrDecodeError(
            f"Unexpected payload from {endpoint or model.__name__} at {field}",
            kind=DecodeErrorKind.SCHEMA_MISMATCH,
            field=field,
            endpoint=endpoint,
        ) from exc


def decode_invasions(raw: bytes) -> InvasionsPayload:
    endpoint = INVASIONS_ENDPOINT
    payload = validate_payload(InvasionsPayload, load_json(raw, endpoint=endpoint), endpoint=endpoint)
    # The invasion map may only be omitted from a degraded response.
    if payload.error is None and payload.invasions is None:
        raise TtrDecodeError(
            f"Unexpected payload from {endpoint} at invasions",
            kind=DecodeErrorKind.SCHEMA_MISMATCH,
            field="invasions",
            endpoint=endpoint,
        )
    return payload


def decode_field_offices(raw: bytes) -> FieldOfficesPayload:
    endpoint = FIELD_OFFICES_ENDPOINT
    return validate_payload(FieldOfficesPayload, load_json(raw, endpoint=endpoint), endpoint=endpoint)
