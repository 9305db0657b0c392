"""Tests for decoding raw feed bodies into wire models."""

from __future__ import annotations

import json
from typing import Any

import pytest

from pyttr.exceptions import DecodeErrorKind, TtrDecodeError
from pyttr.ingestion.decode import decode_field_offices, decode_invasions

from .conftest import FIELD_OFFICES, SILLY_STREET_INVASIONS


def _body(payload: Any) -> bytes:
    return json.dumps(payload).encode()


class TestDecodeInvasions:
    def test_basic_parsing(self) -> None:
        payload = decode_invasions(_body(SILLY_STREET_INVASIONS))
        assert payload.error is None
        assert payload.last_updated == 1700000000
        assert payload.invasions is not None
        details = payload.invasions["Silly Street"]
        assert details.as_of == 1700000000
        assert details.type == "Supervisor"
        assert details.progress == "40/50"

    def test_unknown_raw_key_is_ignored(self) -> None:
        payload = {
            "error": None,
            "invasions": {
                "Silly Street": {"asOf": 1, "type": "Flunky", "progress": "1/2", "raw": "x"},
            },
            "lastUpdated": 1,
            "raw": "y",
        }
        decoded = decode_invasions(_body(payload))
        assert decoded.invasions is not None
        assert decoded.invasions["Silly Street"].progress == "1/2"

    def test_malformed_json(self) -> None:
        with pytest.raises(TtrDecodeError) as exc_info:
            decode_invasions(b"not json")
        assert exc_info.value.kind == DecodeErrorKind.MALFORMED_JSON

    def test_invalid_utf8_is_malformed(self) -> None:
        with pytest.raises(TtrDecodeError) as exc_info:
            decode_invasions(b'{"error": "\xff"}')
        assert exc_info.value.kind == DecodeErrorKind.MALFORMED_JSON

    def test_unknown_fields_ignored(self) -> None:
        payload = dict(SILLY_STREET_INVASIONS)
        payload["serverVersion"] = "v2"
        payload["invasions"] = {
            "Silly Street": {"asOf": 1, "type": "Flunky", "progress": "1/2", "mega": False},
        }
        decoded = decode_invasions(_body(payload))
        assert decoded.invasions is not None
        assert decoded.invasions["Silly Street"].type == "Flunky"

    def test_error_field_with_missing_invasions_still_decodes(self) -> None:
        decoded = decode_invasions(_body({"error": "Toontown is closed", "lastUpdated": 1700000000}))
        assert decoded.error == "Toontown is closed"
        assert decoded.invasions is None

    def test_missing_invasions_without_error_is_mismatch(self) -> None:
        with pytest.raises(TtrDecodeError) as exc_info:
            decode_invasions(_body({"error": None, "lastUpdated": 1700000000}))
        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH
        assert exc_info.value.field == "invasions"

    def test_missing_last_updated(self) -> None:
        with pytest.raises(TtrDecodeError) as exc_info:
            decode_invasions(_body({"error": None, "invasions": {}}))
        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH
        assert exc_info.value.field == "lastUpdated"

    def test_wrong_type_reports_nested_field(self) -> None:
        payload = {
            "error": None,
            "invasions": {"Loopy Lane": {"asOf": "yesterday", "type": "Flunky", "progress": "1/2"}},
            "lastUpdated": 1,
        }
        with pytest.raises(TtrDecodeError) as exc_info:
            decode_invasions(_body(payload))
        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH
        assert exc_info.value.field == "invasions.Loopy Lane.asOf"

    def test_numeric_string_is_not_coerced(self) -> None:
        with pytest.raises(TtrDecodeError) as exc_info:
            decode_invasions(_body({"error": None, "invasions": {}, "lastUpdated": "1700000000"}))
        assert exc_info.value.field == "lastUpdated"

    def test_top_level_array_is_mismatch(self) -> None:
        with pytest.raises(TtrDecodeError) as exc_info:
            decode_invasions(b"[]")
        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH
        assert exc_info.value.field == "$"


class TestDecodeFieldOffices:
    def test_basic_parsing(self) -> None:
        payload = decode_field_offices(_body(FIELD_OFFICES))
        assert payload.last_updated == 1700000100
        office = payload.field_offices["3100"]
        assert office.department == "s"
        assert office.difficulty == 4
        assert office.annexes == 12
        assert office.open is True

    def test_missing_field_offices(self) -> None:
        with pytest.raises(TtrDecodeError) as exc_info:
            decode_field_offices(_body({"lastUpdated": 1}))
        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH
        assert exc_info.value.field == "fieldOffices"

    def test_int_for_bool_is_mismatch(self) -> None:
        payload = {
            "fieldOffices": {"3100": {"department": "s", "difficulty": 1, "annexes": 2, "open": 1}},
            "lastUpdated": 1,
        }
        with pytest.raises(TtrDecodeError) as exc_info:
            decode_field_offices(_body(payload))
        assert exc_info.value.field == "fieldOffices.3100.open"

    @pytest.mark.parametrize("difficulty", [-1, 5])
    def test_difficulty_out_of_range(self, difficulty: int) -> None:
        payload = {
            "fieldOffices": {"3100": {"department": "s", "difficulty": difficulty, "annexes": 2, "open": True}},
            "lastUpdated": 1,
        }
        with pytest.raises(TtrDecodeError) as exc_info:
            decode_field_offices(_body(payload))
        assert exc_info.value.field == "fieldOffices.3100.difficulty"
