from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Scalar = Union[None, int, float, str]
Record = Dict[str, Any]


class Shape(str, Enum):
    SINGLE = "single"
    LIST = "list"


class RecordSet(BaseModel):
    """Records loaded from one key plus the top-level shape they came from.

    ``records`` normally holds dicts; elements of a stored list that are not
    objects are kept untouched so they survive a write-back.
    """
    shape: Shape = Shape.LIST
    records: List[Any] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.records)


class SessionState(BaseModel):
    model_config = ConfigDict(extra="forbid")

    selected_key: Optional[str] = None
    record_set: Optional[RecordSet] = None
    editing_index: Optional[int] = None
    draft: Optional[Record] = None
    # the stored value under selected_key could not be decoded; nothing may overwrite it
    decode_failed: bool = False

    @property
    def is_editing(self) -> bool:
        return self.draft is not None

    def clear_edit(self) -> None:
        self.editing_index = None
        self.draft = None


class Outcome(BaseModel):
    """Result of an editor action, for the view to report."""
    ok: bool = True
    message: str = ""
    removed_key: Optional[str] = None

    @classmethod
    def success(cls, message: str = "", **kw: Any) -> "Outcome":
        return cls(ok=True, message=message, **kw)

    @classmethod
    def failure(cls, message: str) -> "Outcome":
        return cls(ok=False, message=message)

