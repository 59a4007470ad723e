from __future__ import annotations
import json
from typing import Any, Dict, Mapping

from .codec import parse_json
from .errors import DecodeError
from .store import StoreAdapter


def dump_store(store: StoreAdapter) -> Dict[str, Any]:
    """Snapshot every key as parsed JSON; unparsable values stay raw strings."""
    out: Dict[str, Any] = {}
    for key in store.list_keys():
        raw = store.get(key)
        if raw is None:
            continue
        try:
            out[key] = parse_json(raw, key=key)
        except DecodeError:
            out[key] = raw
    return out


def load_dump(store: StoreAdapter, data: Mapping[str, Any], *, replace: bool = False) -> int:
    """Write a dump back into ``store``. Returns the number of keys written.

    Every value is stored JSON-encoded, so a raw value that was not valid JSON
    in the source store comes back as a JSON string. With ``replace`` keys
    missing from ``data`` are removed first.
    """
    if not isinstance(data, Mapping):
        raise ValueError("Dump must be a JSON object of key -> value.")

    # encode everything up front so a bad value leaves the store untouched
    encoded = {str(k): json.dumps(v, ensure_ascii=False, allow_nan=False) for k, v in data.items()}

    if replace:
        for key in store.list_keys():
            if key not in encoded:
                store.remove(key)

    for key, raw in encoded.items():
        store.set(key, raw)
    return len(encoded)
