from __future__ import annotations
import json
from typing import Any, Dict, Optional

from .errors import DecodeError
from .schemas import RecordSet, Shape

UNNAMED_FIELD = ""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON value")


def parse_json(raw: str, *, key: Optional[str] = None) -> Any:
    """Strict JSON parse: NaN/Infinity, over-deep nesting and oversized
    integers all raise DecodeError."""
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as e:
        where = f" for key {key!r}" if key is not None else ""
        raise DecodeError(f"Stored value{where} is not valid JSON: {e}", key=key) from e


def decode(raw: str, *, key: Optional[str] = None) -> RecordSet:
    """Parse a stored value into a RecordSet.

    A JSON array becomes a LIST set of its elements. Anything else (an object,
    or a bare scalar) becomes a SINGLE set holding that one value.
    """
    parsed = parse_json(raw, key=key)

    if isinstance(parsed, list):
        return RecordSet(shape=Shape.LIST, records=parsed)
    return RecordSet(shape=Shape.SINGLE, records=[parsed])


def encode(record_set: RecordSet) -> str:
    # bare record only while a SINGLE key still holds exactly one record
    if record_set.shape == Shape.SINGLE and len(record_set.records) == 1:
        value: Any = record_set.records[0]
    else:
        value = list(record_set.records)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def record_fields(record: Any) -> Dict[str, Any]:
    """Field view of a record; non-object elements show as one unnamed field."""
    if isinstance(record, dict):
        return record
    return {UNNAMED_FIELD: record}


def display_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def input_value(value: Any) -> str:
    if value is None:
        return ""
    return display_value(value)
