# app/data/json_store.py
import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple, TypeVar

from app.domain.errors import StorageCorruptError
from app.utils.logging import get_logger
from app.utils.retry import file_retry

logger = get_logger(__name__)

Record = Dict[str, Any]
T = TypeVar("T")


class JsonDocumentStore:
    """
    One JSON file holding an array of objects.
    - load: snapshot of the array
    - mutate: read-modify-write under the file guard
    - every access (reads too) goes through the same threading.Lock
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def open(self) -> "JsonDocumentStore":
        """Create the parent directory and an empty-array file when missing."""
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                logger.info(f"Initializing empty document {self.path}")
                self._write([])
        return self

    def load(self) -> List[Record]:
        with self._lock:
            return self._read()

    def mutate(self, fn: Callable[[List[Record]], Tuple[List[Record], T]]) -> T:
        """
        `fn` receives the current array and returns (new_array, result).
        If `fn` raises, nothing is written.
        """
        with self._lock:
            records = self._read()
            new_records, result = fn(records)
            self._write(new_records)
            return result

    def _read(self) -> List[Record]:
        if not self.path.exists():
            return []

        content = self.path.read_text(encoding="utf-8")
        if not content.strip():
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Cannot parse {self.path}: {e}")
            raise StorageCorruptError(f"Storage file {self.path} is corrupt: {e}") from e

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.error(f"{self.path} does not hold an array of objects")
            raise StorageCorruptError(
                f"Storage file {self.path} is corrupt: expected an array of objects"
            )
        return data

    def _write(self, records: List[Record]) -> None:
        # whole content goes to a sibling temp file, then replaces the target
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", dir=self.path.parent, prefix=f".{self.path.name}.", delete=False, encoding="utf-8"
            ) as tmp:
                tmp_path = tmp.name
                json.dump(records, tmp, indent=2, ensure_ascii=False)
            self._replace(tmp_path)
        except Exception as e:
            logger.error(f"Failed to write {self.path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    @file_retry()
    def _replace(self, tmp_path: str) -> None:
        os.replace(tmp_path, self.path)


_stores: Dict[Path, JsonDocumentStore] = {}
_stores_lock = threading.Lock()


def open_store(path) -> JsonDocumentStore:
    """
    Process-wide store for `path`, keyed by absolute path.
    Two callers asking for the same file share one instance and one guard.
    """
    key = Path(path).resolve()
    with _stores_lock:
        store = _stores.get(key)
        if store is None:
            store = JsonDocumentStore(key).open()
            _stores[key] = store
        return store


def close_stores() -> None:
    """Forget every registered store (shutdown / tests)."""
    with _stores_lock:
        _stores.clear()
