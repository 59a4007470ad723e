"""Tests for decoding stored values into record sets and back."""

import json
import sys

import pytest

from src.storeeditor.codec import decode, display_value, encode, input_value, record_fields
from src.storeeditor.errors import DecodeError
from src.storeeditor.schemas import RecordSet, Shape


class TestDecode:

    def test_object_is_single(self):
        rs = decode('{"name":"Ann","age":30}')
        assert rs.shape == Shape.SINGLE
        assert rs.records == [{"name": "Ann", "age": 30}]

    def test_array_is_list(self):
        rs = decode('[{"id":1},{"id":2}]')
        assert rs.shape == Shape.LIST
        assert rs.records == [{"id": 1}, {"id": 2}]

    def test_empty_array(self):
        rs = decode("[]")
        assert rs.shape == Shape.LIST
        assert rs.records == []

    def test_array_of_scalars_kept(self):
        rs = decode('[1, "a", null]')
        assert rs.shape == Shape.LIST
        assert rs.records == [1, "a", None]

    def test_bare_scalar_is_single(self):
        rs = decode("5")
        assert rs.shape == Shape.SINGLE
        assert rs.records == [5]

    def test_invalid_json_raises(self):
        with pytest.raises(DecodeError, match="not valid JSON"):
            decode("{not json")

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity", "[1, NaN]", "{\"a\": Infinity}"])
    def test_non_finite_constants_rejected(self, raw):
        with pytest.raises(DecodeError):
            decode(raw)

    def test_deep_nesting_raises_decode_error(self):
        with pytest.raises(DecodeError):
            decode("[" * 100000)

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int string conversion limit")
    def test_oversized_integer_raises_decode_error(self):
        with pytest.raises(DecodeError):
            decode("1" * 5000)

    def test_decode_error_carries_key(self):
        with pytest.raises(DecodeError) as exc:
            decode("", key="broken")
        assert exc.value.key == "broken"
        assert "broken" in str(exc.value)


class TestEncode:

    def test_single_with_one_record_is_bare(self):
        rs = RecordSet(shape=Shape.SINGLE, records=[{"a": 1}])
        assert json.loads(encode(rs)) == {"a": 1}

    def test_single_with_two_records_becomes_list(self):
        rs = RecordSet(shape=Shape.SINGLE, records=[{"a": 1}, {"a": 2}])
        assert json.loads(encode(rs)) == [{"a": 1}, {"a": 2}]

    def test_list_with_one_record_stays_list(self):
        rs = RecordSet(shape=Shape.LIST, records=[{"id": 2}])
        assert encode(rs) == '[{"id":2}]'

    def test_non_finite_float_not_written(self):
        rs = RecordSet(shape=Shape.SINGLE, records=[{"x": float("nan")}])
        with pytest.raises(ValueError):
            encode(rs)

    def test_compact_and_unicode(self):
        rs = RecordSet(shape=Shape.SINGLE, records=[{"name": "Zoë", "age": 31}])
        assert encode(rs) == '{"name":"Zoë","age":31}'

    def test_single_round_trip(self):
        o = {"name": "Ann", "age": 30, "note": None}
        rs = RecordSet(shape=Shape.SINGLE, records=[o])
        assert decode(encode(rs)) == rs

    @pytest.mark.parametrize("records", [
        [],
        [{"id": 1}],
        [{"id": 1}, {"id": 2, "x": "y"}, {}],
    ])
    def test_list_round_trip_keeps_order(self, records):
        rs = RecordSet(shape=Shape.LIST, records=records)
        back = decode(encode(rs))
        assert back.shape == Shape.LIST
        assert back.records == records


class TestDisplay:

    @pytest.mark.parametrize("value, shown", [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (30, "30"),
        (-3.5, "-3.5"),
        ("Ann", "Ann"),
        ({"a": 1}, '{"a": 1}'),
        ([1, 2], "[1, 2]"),
    ])
    def test_display_value(self, value, shown):
        assert display_value(value) == shown

    def test_input_value_blank_for_null(self):
        assert input_value(None) == ""
        assert input_value(31) == "31"

    def test_record_fields_for_non_object(self):
        assert record_fields(7) == {"": 7}
        assert record_fields({"a": 1}) == {"a": 1}
