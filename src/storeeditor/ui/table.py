from __future__ import annotations
from typing import Any, Dict, List

from ..codec import decode, display_value, record_fields
from ..errors import DecodeError
from ..store import StoreAdapter


def record_to_row(record: Any) -> Dict[str, str]:
    """Flatten a record into display strings for a table row."""
    return {k: display_value(v) for k, v in record_fields(record).items()}


def records_to_rows(records: List[Any]) -> List[Dict[str, str]]:
    rows = []
    for i, rec in enumerate(records):
        row = {"#": str(i + 1)}
        row.update(record_to_row(rec))
        rows.append(row)
    return rows


def key_summary(store: StoreAdapter) -> List[Dict[str, Any]]:
    """One row per key: shape, record count, stored size and last write."""
    out: List[Dict[str, Any]] = []
    # only SqliteStore tracks write times
    updated_at = getattr(store, "updated_at", None)
    for key in store.list_keys():
        raw = store.get(key)
        if raw is None:
            continue
        row: Dict[str, Any] = {"key": key, "size_bytes": len(raw.encode("utf-8"))}
        row["updated_at"] = updated_at(key) if updated_at else None
        try:
            rs = decode(raw, key=key)
            row["shape"] = rs.shape.value
            row["records"] = len(rs)
        except DecodeError:
            row["shape"] = "invalid JSON"
            row["records"] = 0
        out.append(row)
    return out
