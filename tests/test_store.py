"""Tests for the entity store backends."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from practice_api.app.core.config import Settings
from practice_api.app.core.store import (
    EntityStore,
    MemoryCollection,
    SqliteCollection,
    build_store,
)
from practice_api.app.main import create_app


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    if request.param == "memory":
        return EntityStore.in_memory()
    return EntityStore.sqlite(str(tmp_path / "store.db"))


class TestCollections:
    def test_create_assigns_id_and_keeps_fields(self, store):
        entity = store.users.create({"name": "Ada", "email": "ada@example.com"})
        assert entity["id"]
        assert entity["name"] == "Ada"
        assert entity["email"] == "ada@example.com"

    def test_create_discards_supplied_id(self, store):
        entity = store.products.create({"id": "mine", "name": "Widget", "price": 1.5, "category": "Tools"})
        assert entity["id"] != "mine"
        assert store.products.list() == [entity]

    def test_list_preserves_insertion_order(self, store):
        created = [store.users.create({"name": str(i), "email": f"{i}@x.io"}) for i in range(10)]
        assert store.users.list() == created

    def test_list_returns_copies(self, store):
        store.users.create({"name": "Ada", "email": "ada@example.com"})
        store.users.list()[0]["name"] = "changed"
        assert store.users.list()[0]["name"] == "Ada"

    def test_concurrent_creates_get_unique_ids(self, store):
        def create(i):
            return store.users.create({"name": f"user{i}", "email": f"u{i}@example.com"})["id"]

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(create, range(40)))
        assert len(set(ids)) == 40
        assert len(store.users.list()) == 40


class TestIdStrategies:
    def test_uuid_ids_are_hex_tokens(self):
        collection = MemoryCollection("users")
        entity_id = collection.create({"name": "Ada"})["id"]
        assert len(entity_id) == 32
        int(entity_id, 16)

    def test_memory_sequence(self):
        collection = MemoryCollection("users", id_strategy="sequence")
        ids = [collection.create({"name": str(i)})["id"] for i in range(3)]
        assert ids == ["1", "2", "3"]

    def test_sqlite_sequence_is_per_collection(self, tmp_path):
        store = EntityStore.sqlite(str(tmp_path / "seq.db"), id_strategy="sequence")
        assert store.users.create({"name": "a"})["id"] == "1"
        assert store.products.create({"name": "p"})["id"] == "1"
        assert store.users.create({"name": "b"})["id"] == "2"
        assert [u["id"] for u in store.users.list()] == ["1", "2"]


class TestSqlitePersistence:
    def test_entities_survive_a_new_store(self, tmp_path):
        path = str(tmp_path / "persist.db")
        EntityStore.sqlite(path).users.create({"name": "Ada", "email": "ada@example.com"})
        reopened = EntityStore.sqlite(path)
        assert [u["name"] for u in reopened.users.list()] == ["Ada"]

    def test_migrations_are_applied_once(self, tmp_path):
        path = str(tmp_path / "migrate.db")
        EntityStore.sqlite(path)
        EntityStore.sqlite(path)
        collection = SqliteCollection("users", path)
        assert collection.list() == []

    def test_app_with_sqlite_backend(self, sqlite_settings, sample_product):
        client = TestClient(create_app(sqlite_settings))
        created = client.post("/api/products", json=sample_product).json()["data"]
        again = TestClient(create_app(sqlite_settings))
        assert again.get("/api/products").json()["data"] == [created]


def test_build_store_selects_backend(tmp_path):
    memory = build_store(Settings(storage_backend="memory"))
    assert isinstance(memory.users, MemoryCollection)
    sqlite = build_store(Settings(storage_backend="sqlite", database_url=str(tmp_path / "b.db")))
    assert isinstance(sqlite.users, SqliteCollection)


def test_store_requires_both_collections():
    with pytest.raises(ValueError):
        EntityStore({"users": MemoryCollection("users")})
