"""In-memory data source seeded from the placeholder JSON files.

Each collection is a list of plain dict rows keyed by ``id``. Nothing is
written back to disk: the store lives for the lifetime of the process.
"""

from __future__ import annotations

import copy
import json
import logging
import uuid
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from hotel_pms.core.config import get_settings
from hotel_pms.core.security import hash_password

logger = logging.getLogger(__name__)

COLLECTIONS = ("hotels", "rooms", "guests", "bookings", "users")


def _load_collection(path: Path) -> list[dict]:
    try:
        with path.open(encoding="utf-8") as fh:
            rows = json.load(fh)
    except FileNotFoundError:
        logger.warning("Data file %s not found, starting with an empty collection", path)
        return []
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading data file {path}: {e}")
        return []

    if not isinstance(rows, list):
        logger.error(f"Data file {path} must contain a JSON array, got {type(rows).__name__}")
        return []
    return [row for row in rows if isinstance(row, dict)]


class JsonStore:
    def __init__(self, collections: dict[str, list[dict]] | None = None):
        self._collections: dict[str, list[dict]] = {name: [] for name in COLLECTIONS}
        for name, rows in (collections or {}).items():
            self._collections[name] = [copy.deepcopy(row) for row in rows]
        for rows in self._collections.values():
            for row in rows:
                row.setdefault("id", str(uuid.uuid4()))

    @classmethod
    def from_directory(cls, data_dir: Path) -> JsonStore:
        collections = {
            name: _load_collection(Path(data_dir) / f"{name}.json") for name in COLLECTIONS
        }
        logger.info(
            "Loaded placeholder data from %s: %s",
            data_dir,
            ", ".join(f"{name}={len(rows)}" for name, rows in collections.items()),
        )
        return cls(collections)

    def _rows(self, collection: str) -> list[dict]:
        if collection not in self._collections:
            raise KeyError(f"Unknown collection: {collection}")
        return self._collections[collection]

    def all(self, collection: str) -> list[dict]:
        return [copy.deepcopy(row) for row in self._rows(collection)]

    def get(self, collection: str, row_id: str) -> dict | None:
        for row in self._rows(collection):
            if row.get("id") == row_id:
                return copy.deepcopy(row)
        return None

    def insert(self, collection: str, data: dict) -> dict:
        row = copy.deepcopy(data)
        row.setdefault("id", str(uuid.uuid4()))
        self._rows(collection).append(row)
        return copy.deepcopy(row)

    def update(self, collection: str, row_id: str, data: dict) -> dict | None:
        for row in self._rows(collection):
            if row.get("id") == row_id:
                row.update(copy.deepcopy(data))
                row["id"] = row_id
                return copy.deepcopy(row)
        return None

    def delete(self, collection: str, row_ids: str | Iterable[str]) -> int:
        ids = {row_ids} if isinstance(row_ids, str) else set(row_ids)
        rows = self._rows(collection)
        kept = [row for row in rows if row.get("id") not in ids]
        removed = len(rows) - len(kept)
        rows[:] = kept
        return removed

    def clear(self, collection: str) -> int:
        rows = self._rows(collection)
        removed = len(rows)
        rows.clear()
        return removed


def bootstrap_admin(store: JsonStore, username: str | None, password: str | None) -> None:
    if not username or not password or store.all("users"):
        return
    store.insert(
        "users",
        {
            "username": username,
            "full_name": username,
            "password_hash": hash_password(password),
            "is_active": True,
        },
    )
    logger.info("Bootstrapped operator account %s", username)


@lru_cache
def get_store() -> JsonStore:
    settings = get_settings()
    store = JsonStore.from_directory(settings.data_dir)
    bootstrap_admin(store, settings.admin_username, settings.admin_password)
    return store
