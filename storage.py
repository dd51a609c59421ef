"""
Local key-value storage for the tracker.

Two collections are kept, each keyed by ISO date (YYYY-MM-DD):

- dailyData: {date, steps, water, calories, protein, carbs, fat}
- weights:   {date, weight}

`JsonFileStore` keeps one JSON document per collection under a base directory
and rewrites it atomically on every put. `MemoryStore` has the same interface
and is used in tests and in UI test mode.
"""

import json
import logging
import os
import tempfile
import threading
from typing import Any, Dict, List, Optional

from errors import StorageError
from models import DateLike, date_key

DAILY_DATA = "dailyData"
WEIGHTS = "weights"
COLLECTIONS = (DAILY_DATA, WEIGHTS)

logger = logging.getLogger(__name__)


def load_json(path: str, default):
    """Load JSON from a file, returning default if the file does not exist."""
    if not os.path.exists(path):
        return default
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise StorageError(f"Could not read {path}: {e}") from e


def atomic_write_json(path: str, data) -> None:
    """Write JSON through a temp file so readers never see a half-written file."""
    parent = os.path.dirname(path) or "."
    tmp = None
    try:
        os.makedirs(parent, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=".tmp_store_", dir=parent, text=True)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except (OSError, TypeError, ValueError) as e:
        if tmp and os.path.exists(tmp):
            os.remove(tmp)
        raise StorageError(f"Could not write {path}: {e}") from e


class BaseStore:
    """
    Shared get/put/get_all logic.

    Subclasses provide `_init_collections`, `_read` and `_write`. The store is
    opened lazily on first access; `open()` may be called any number of times.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._opened = False

    def open(self) -> None:
        with self._lock:
            if self._opened:
                return
            self._init_collections()
            self._opened = True

    def _check(self, collection: str) -> None:
        if collection not in COLLECTIONS:
            raise StorageError(f"Unknown collection: {collection!r}")

    def get(self, collection: str, key: DateLike) -> Optional[Dict[str, Any]]:
        """Return the record stored at key, or None if there is none."""
        self._check(collection)
        with self._lock:
            self.open()
            record = self._read(collection).get(date_key(key))
        return dict(record) if record is not None else None

    def put(self, collection: str, key: DateLike, record: Dict[str, Any]) -> None:
        """Store record at key, replacing whatever was there."""
        self._check(collection)
        k = date_key(key)
        with self._lock:
            self.open()
            docs = self._read(collection)
            docs[k] = {**record, "date": k}
            self._write(collection, docs)
        logger.debug("put %s[%s]", collection, k)

    def get_all(self, collection: str) -> List[Dict[str, Any]]:
        """Return every record in the collection, in no particular order."""
        self._check(collection)
        with self._lock:
            self.open()
            return [dict(r) for r in self._read(collection).values()]

    def _init_collections(self) -> None:
        raise NotImplementedError

    def _read(self, collection: str) -> Dict[str, Dict[str, Any]]:
        raise NotImplementedError

    def _write(self, collection: str, docs: Dict[str, Dict[str, Any]]) -> None:
        raise NotImplementedError


class JsonFileStore(BaseStore):
    """One JSON file per collection under base_dir."""

    def __init__(self, base_dir: str):
        super().__init__()
        self.base_dir = base_dir

    def collection_path(self, collection: str) -> str:
        return os.path.join(self.base_dir, f"{collection}.json")

    def _init_collections(self) -> None:
        try:
            os.makedirs(self.base_dir, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Could not create {self.base_dir}: {e}") from e
        for name in COLLECTIONS:
            path = self.collection_path(name)
            # existing data is never touched
            if not os.path.exists(path):
                atomic_write_json(path, {})
        logger.info("Opened JSON store at %s", self.base_dir)

    def _read(self, collection: str) -> Dict[str, Dict[str, Any]]:
        path = self.collection_path(collection)
        docs = load_json(path, {})
        if not isinstance(docs, dict):
            raise StorageError(f"{path} does not hold a JSON object")
        return docs

    def _write(self, collection: str, docs: Dict[str, Dict[str, Any]]) -> None:
        atomic_write_json(self.collection_path(collection), docs)


class MemoryStore(BaseStore):
    """Dict-backed store; nothing survives the process."""

    def __init__(self):
        super().__init__()
        self._data: Dict[str, Dict[str, Dict[str, Any]]] = {}

    def _init_collections(self) -> None:
        for name in COLLECTIONS:
            self._data.setdefault(name, {})

    def _read(self, collection: str) -> Dict[str, Dict[str, Any]]:
        return dict(self._data[collection])

    def _write(self, collection: str, docs: Dict[str, Dict[str, Any]]) -> None:
        self._data[collection] = docs
