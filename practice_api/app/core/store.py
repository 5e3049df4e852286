"""
Entity store for the ``users`` and ``products`` collections.

A collection supports exactly two operations: ``create`` assigns a
fresh identifier to a validated record and stores it, and ``list``
returns every stored record in insertion order.  Both are atomic with
respect to concurrent requests.

Two backends are available and selected through ``Settings``:

* ``MemoryCollection`` keeps an arena (a mapping from id to entity,
  which preserves insertion order) guarded by a lock.
* ``SqliteCollection`` stores each entity as a JSON row in the
  ``entities`` table created by :func:`practice_api.app.core.db.init_db`.

Identifiers are strings.  With the ``uuid`` strategy they are random
hex tokens; with ``sequence`` they are a per‑collection counter
starting at ``"1"``.
"""

from __future__ import annotations

import itertools
import json
import logging
import threading
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .config import Settings
from .db import get_cursor, get_database_path, init_db


logger = logging.getLogger(__name__)

Entity = Dict[str, Any]

COLLECTIONS = ("users", "products")


def new_token() -> str:
    return uuid.uuid4().hex


class Collection(ABC):
    """A single ordered collection of entities."""

    def __init__(self, name: str, id_strategy: str = "uuid") -> None:
        self.name = name
        self.id_strategy = id_strategy

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> Entity:
        """Store ``fields`` under a newly assigned id and return the entity.

        Any ``id`` key in ``fields`` is discarded; identifiers are only
        ever assigned by the store.
        """

    @abstractmethod
    def list(self) -> List[Entity]:
        """Return all entities in insertion order."""

    @staticmethod
    def _build(entity_id: str, fields: Dict[str, Any]) -> Entity:
        entity: Entity = {"id": entity_id}
        entity.update((key, value) for key, value in fields.items() if key != "id")
        return entity


class MemoryCollection(Collection):
    """Arena‑style in‑process collection."""

    def __init__(self, name: str, id_strategy: str = "uuid") -> None:
        super().__init__(name, id_strategy)
        self._lock = threading.Lock()
        self._entities: Dict[str, Entity] = {}
        self._counter = itertools.count(1)

    def _next_id(self) -> str:
        if self.id_strategy == "sequence":
            return str(next(self._counter))
        return new_token()

    def create(self, fields: Dict[str, Any]) -> Entity:
        with self._lock:
            entity_id = self._next_id()
            entity = self._build(entity_id, fields)
            self._entities[entity_id] = entity
        return dict(entity)

    def list(self) -> List[Entity]:
        with self._lock:
            return [dict(entity) for entity in self._entities.values()]


class SqliteCollection(Collection):
    """Collection persisted in the SQLite ``entities`` table."""

    def __init__(self, name: str, db_path: str, id_strategy: str = "uuid") -> None:
        super().__init__(name, id_strategy)
        self.db_path = db_path

    def create(self, fields: Dict[str, Any]) -> Entity:
        payload = {key: value for key, value in fields.items() if key != "id"}
        with get_cursor(self.db_path) as cursor:
            if self.id_strategy == "sequence":
                # The id is the number of rows in this collection, so it is
                # derived inside the same transaction as the insert.
                cursor.execute(
                    "INSERT INTO entities (collection, payload) VALUES (?, ?)",
                    (self.name, json.dumps(payload)),
                )
                seq = cursor.lastrowid
                row = cursor.execute(
                    "SELECT COUNT(*) AS count FROM entities WHERE collection = ? AND seq <= ?",
                    (self.name, seq),
                ).fetchone()
                entity_id = str(row["count"])
                cursor.execute(
                    "UPDATE entities SET entity_id = ? WHERE seq = ?",
                    (entity_id, seq),
                )
            else:
                entity_id = new_token()
                cursor.execute(
                    "INSERT INTO entities (collection, entity_id, payload) VALUES (?, ?, ?)",
                    (self.name, entity_id, json.dumps(payload)),
                )
        return self._build(entity_id, payload)

    def list(self) -> List[Entity]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                "SELECT entity_id, payload FROM entities WHERE collection = ? ORDER BY seq ASC",
                (self.name,),
            ).fetchall()
        return [self._build(row["entity_id"], json.loads(row["payload"])) for row in rows]


class EntityStore:
    """Holds one collection per entity type."""

    def __init__(self, collections: Dict[str, Collection]) -> None:
        missing = [name for name in COLLECTIONS if name not in collections]
        if missing:
            raise ValueError(f"Store is missing collections: {', '.join(missing)}")
        self.collections = collections

    @property
    def users(self) -> Collection:
        return self.collections["users"]

    @property
    def products(self) -> Collection:
        return self.collections["products"]

    @classmethod
    def in_memory(cls, id_strategy: str = "uuid") -> "EntityStore":
        return cls({name: MemoryCollection(name, id_strategy) for name in COLLECTIONS})

    @classmethod
    def sqlite(cls, db_path: str, id_strategy: str = "uuid") -> "EntityStore":
        init_db(db_path)
        return cls({name: SqliteCollection(name, db_path, id_strategy) for name in COLLECTIONS})


def build_store(settings: Settings) -> EntityStore:
    """Create the store selected by ``settings.storage_backend``."""
    if settings.storage_backend == "memory":
        logger.info("Using in-memory store (ids: %s)", settings.id_strategy)
        return EntityStore.in_memory(settings.id_strategy)
    if settings.storage_backend == "sqlite":
        db_path = get_database_path(settings.database_url)
        logger.info("Using SQLite store at %s (ids: %s)", db_path, settings.id_strategy)
        return EntityStore.sqlite(db_path, settings.id_strategy)
    raise ValueError(f"Unknown storage backend {settings.storage_backend!r}")
