from __future__ import annotations
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class StoreAdapter(Protocol):
    """Key-value persistence the editor reads and writes through.

    Values are JSON text. ``set`` must leave either the old or the new value,
    never a partial one; ``remove`` on an absent key is a no-op.
    """

    def list_keys(self) -> List[str]: ...

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed store, for tests and scratch sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def list_keys(self) -> List[str]:
        return sorted(self._data)

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class SqliteStore:
    """Store backed by a single ``kv`` table in a SQLite database.

    Every call opens its own connection and commits one statement, so a write
    is atomic and nothing is held open between Streamlit reruns.
    """

    def __init__(self, db_path: Union[str, Path]) -> None:
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.init_db()

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path), timeout=30)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL;")
        conn.execute("PRAGMA synchronous=NORMAL;")
        conn.execute("PRAGMA busy_timeout=30000;")
        return conn

    def init_db(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute("""CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )""")
            conn.commit()
        finally:
            conn.close()

    def list_keys(self) -> List[str]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT key FROM kv ORDER BY key").fetchall()
        finally:
            conn.close()
        return [r["key"] for r in rows]

    def get(self, key: str) -> Optional[str]:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ? LIMIT 1", (key,)).fetchone()
        finally:
            conn.close()
        if not row:
            return None
        return row["value"]

    def set(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc).isoformat()
        conn = self._get_conn()
        try:
            with conn:
                conn.execute(
                    """
                    INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value=excluded.value,
                        updated_at=excluded.updated_at
                    """,
                    (key, str(value), now),
                )
        finally:
            conn.close()

    def remove(self, key: str) -> None:
        conn = self._get_conn()
        try:
            with conn:
                conn.execute("DELETE FROM kv WHERE key = ?", (key,))
        finally:
            conn.close()

    def updated_at(self, key: str) -> Optional[str]:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT updated_at FROM kv WHERE key = ? LIMIT 1", (key,)).fetchone()
        finally:
            conn.close()
        return row["updated_at"] if row else None


def open_default_store() -> SqliteStore:
    from .config import DB_PATH

    print(f"[store] using database {DB_PATH}")
    return SqliteStore(DB_PATH)
