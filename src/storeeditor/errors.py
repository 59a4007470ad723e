from __future__ import annotations


class StoreEditorError(Exception):
    """Base class for errors raised by the editor core."""


class DecodeError(StoreEditorError, ValueError):
    """Stored value is not valid JSON."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class InvalidIndex(StoreEditorError, IndexError):
    def __init__(self, index: int, size: int):
        bounds = f"0..{size - 1}" if size else "no records"
        super().__init__(f"Record index {index} out of range ({bounds})")
        self.index = index
        self.size = size


class NoActiveEdit(StoreEditorError, RuntimeError):
    pass


class NoSelectedKey(StoreEditorError, RuntimeError):
    pass
