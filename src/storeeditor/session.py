from __future__ import annotations
import copy
from typing import Any, List, Optional

from .codec import decode, encode
from .coercion import coerce
from .errors import DecodeError, InvalidIndex, NoActiveEdit, NoSelectedKey
from .schemas import Outcome, Record, RecordSet, SessionState, Shape
from .store import StoreAdapter


class EditorSession:
    """Edit state for one user: the selected key, its records and the draft.

    The session is a cache of the last value it loaded or wrote; the store
    stays the authority. There is no concurrency check, so a value changed by
    someone else between ``select`` and ``save`` is overwritten.
    """

    def __init__(self, store: StoreAdapter, state: Optional[SessionState] = None) -> None:
        self.store = store
        self.state = state or SessionState()

    # -- read access --

    @property
    def selected_key(self) -> Optional[str]:
        return self.state.selected_key

    @property
    def records(self) -> List[Any]:
        rs = self.state.record_set
        return list(rs.records) if rs is not None else []

    @property
    def shape(self) -> Optional[Shape]:
        rs = self.state.record_set
        return rs.shape if rs is not None else None

    @property
    def decode_failed(self) -> bool:
        return self.state.decode_failed

    @property
    def draft(self) -> Optional[Record]:
        return self.state.draft

    @property
    def editing_index(self) -> Optional[int]:
        return self.state.editing_index

    def is_editing(self, index: Optional[int] = None) -> bool:
        if index is None:
            return self.state.is_editing
        return self.state.is_editing and self.state.editing_index == index

    def list_keys(self) -> List[str]:
        return self.store.list_keys()

    # -- actions --

    def select(self, key: Optional[str]) -> Outcome:
        """Load ``key`` from the store, replacing whatever was loaded before."""
        self.state.clear_edit()
        self.state.record_set = None
        self.state.decode_failed = False

        if not key:
            self.state.selected_key = None
            return Outcome.success()

        self.state.selected_key = key
        raw = self.store.get(key)
        if raw is None:
            self.state.record_set = RecordSet()
            return Outcome.success(f"Key {key!r} is not in the store.")

        try:
            self.state.record_set = decode(raw, key=key)
        except DecodeError as e:
            self.state.record_set = RecordSet()
            self.state.decode_failed = True
            return Outcome.failure(str(e))

        n = len(self.state.record_set)
        return Outcome.success(f"Loaded {n} record(s) from {key!r}.")

    def reload(self) -> Outcome:
        return self.select(self.state.selected_key)

    def begin_edit(self, index: int) -> None:
        rs = self._require_index(index)
        record = rs.records[index]
        # non-object elements are edited through their unnamed field
        self.state.draft = copy.deepcopy(record) if isinstance(record, dict) else {"": record}
        self.state.editing_index = index

    def change_field(self, field: str, raw_text: str) -> None:
        if self.state.draft is None:
            raise NoActiveEdit("No record is being edited.")
        self.state.draft[field] = coerce(raw_text)

    def save(self) -> Outcome:
        if self.state.draft is None or self.state.editing_index is None:
            return Outcome.success()

        rs = self.state.record_set
        index = self.state.editing_index
        original = rs.records[index]
        draft = self.state.draft
        if not isinstance(original, dict) and set(draft) == {""}:
            draft = draft[""]
        rs.records[index] = draft

        self.store.set(self.state.selected_key, encode(rs))
        self.state.clear_edit()
        return Outcome.success("Saved successfully!")

    def cancel_edit(self) -> None:
        self.state.clear_edit()

    def delete(self, index: int) -> Outcome:
        rs = self._require_index(index)
        key = self.state.selected_key
        # indices shift after a removal, so any open edit is dropped
        self.state.clear_edit()
        del rs.records[index]

        if rs.records:
            self.store.set(key, encode(rs))
            return Outcome.success("Deleted successfully!")

        self.store.remove(key)
        self.state.selected_key = None
        self.state.record_set = None
        return Outcome.success("Deleted successfully!", removed_key=key)

    def add_record(self, record: Optional[Record] = None) -> Outcome:
        """Append a record, write it through and open it for editing.

        Without an explicit ``record`` the new one gets the field names of the
        first record, all set to null.
        """
        key = self.state.selected_key
        if not key:
            raise NoSelectedKey("Select a key before adding records.")
        if self.state.decode_failed:
            raise DecodeError(
                f"Stored value for key {key!r} is not valid JSON; fix it before adding records.",
                key=key,
            )

        rs = self.state.record_set
        if rs is None:
            rs = self.state.record_set = RecordSet()

        if record is None:
            first = rs.records[0] if rs.records else None
            record = {k: None for k in first} if isinstance(first, dict) else {}

        self.state.clear_edit()
        rs.records.append(dict(record))
        self.store.set(key, encode(rs))
        self.begin_edit(len(rs.records) - 1)
        return Outcome.success(f"Added record {len(rs.records)}.")

    # -- internals --

    def _require_index(self, index: int) -> RecordSet:
        rs = self.state.record_set
        size = len(rs) if rs is not None else 0
        if rs is None or isinstance(index, bool) or not rs.is_valid_index(index):
            raise InvalidIndex(index, size)
        return rs
