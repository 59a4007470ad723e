"""Tests for the store adapters."""

from src.storeeditor.store import MemoryStore, SqliteStore, StoreAdapter


class TestStoreContract:
    """Behaviour every adapter must share."""

    def test_is_store_adapter(self, any_store):
        assert isinstance(any_store, StoreAdapter)

    def test_get_missing_is_none(self, any_store):
        assert any_store.get("missing") is None

    def test_set_then_get(self, any_store):
        any_store.set("k", '{"a":1}')
        assert any_store.get("k") == '{"a":1}'

    def test_set_overwrites(self, any_store):
        any_store.set("k", "1")
        any_store.set("k", "2")
        assert any_store.get("k") == "2"
        assert any_store.list_keys() == ["k"]

    def test_list_keys_sorted_snapshot(self, any_store):
        any_store.set("b", "1")
        any_store.set("a", "1")
        keys = any_store.list_keys()
        any_store.set("c", "1")
        assert keys == ["a", "b"]

    def test_remove(self, any_store):
        any_store.set("k", "1")
        any_store.remove("k")
        assert any_store.get("k") is None
        assert any_store.list_keys() == []

    def test_remove_missing_is_noop(self, any_store):
        any_store.remove("never-there")
        assert any_store.list_keys() == []

    def test_unicode_values(self, any_store):
        any_store.set("naam", '{"stad":"Zürich"}')
        assert any_store.get("naam") == '{"stad":"Zürich"}'


class TestSqliteStore:

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "sub" / "store.db"
        SqliteStore(path).set("k", "[1]")
        assert SqliteStore(path).get("k") == "[1]"

    def test_updated_at(self, sqlite_store):
        assert sqlite_store.updated_at("k") is None
        sqlite_store.set("k", "1")
        assert sqlite_store.updated_at("k")


class TestMemoryStore:

    def test_initial_data_copied(self):
        initial = {"a": "1"}
        store = MemoryStore(initial)
        store.set("b", "2")
        assert "b" not in initial
        assert len(store) == 2
        assert "a" in store
