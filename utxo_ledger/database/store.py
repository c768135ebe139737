# utxo_ledger/database/store.py
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple

import plyvel
from sortedcontainers import SortedDict

from utxo_ledger.exceptions import StoreAccessError
from utxo_ledger.utils.logging_config import logger


class LedgerStore(ABC):
    """
    Ordered key-value capability the ledger is written against.

    Keys and values are bytes. `scan` yields entries in ascending key order
    and must be lazy: a caller that stops iterating early has only touched
    the keys it consumed.
    """

    def __init__(self):
        self.lock = threading.RLock()

    @abstractmethod
    def get(self, key: bytes) -> Optional[bytes]:
        ...

    @abstractmethod
    def put(self, key: bytes, value: bytes) -> None:
        ...

    @abstractmethod
    def delete(self, key: bytes) -> None:
        ...

    @abstractmethod
    def scan(self, prefix: bytes = b'') -> Iterator[Tuple[bytes, bytes]]:
        ...

    def scan_all(self) -> Iterator[Tuple[bytes, bytes]]:
        return self.scan(b'')

    @abstractmethod
    def write_batch(self, writes: Dict[bytes, Optional[bytes]]) -> None:
        """Apply puts (bytes value) and deletes (None value) all-or-nothing"""
        ...

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def _prefix_end(prefix: bytes) -> Optional[bytes]:
    """Smallest key greater than every key starting with `prefix` (None: unbounded)"""
    stripped = prefix.rstrip(b'\xff')
    if not stripped:
        return None
    return stripped[:-1] + bytes([stripped[-1] + 1])


class MemoryStore(LedgerStore):
    """In-process ordered store backed by a SortedDict"""

    def __init__(self, initial: Optional[Dict[bytes, bytes]] = None):
        super().__init__()
        self._data: SortedDict = SortedDict(initial or {})

    def get(self, key: bytes) -> Optional[bytes]:
        return self._data.get(key)

    def put(self, key: bytes, value: bytes) -> None:
        self._data[key] = value

    def delete(self, key: bytes) -> None:
        self._data.pop(key, None)

    def scan(self, prefix: bytes = b'') -> Iterator[Tuple[bytes, bytes]]:
        # Snapshot the matching keys so writes during iteration do not break it
        keys = list(self._data.irange(minimum=prefix or None, maximum=_prefix_end(prefix),
                                      inclusive=(True, False)))
        for key in keys:
            value = self._data.get(key)
            if value is not None:
                yield key, value

    def write_batch(self, writes: Dict[bytes, Optional[bytes]]) -> None:
        with self.lock:
            for key, value in writes.items():
                if value is None:
                    self._data.pop(key, None)
                else:
                    self._data[key] = value

    def __len__(self) -> int:
        return len(self._data)

    def snapshot(self) -> Dict[bytes, bytes]:
        return dict(self._data)


class PlyvelStore(LedgerStore):
    """LevelDB-backed store"""

    def __init__(self, db_path: str = './utxo_ledger_db', create_if_missing: bool = True):
        super().__init__()
        self.db_path = db_path
        try:
            if create_if_missing:
                Path(db_path).mkdir(parents=True, exist_ok=True)
            self.db = plyvel.DB(db_path, create_if_missing=create_if_missing)
        except (plyvel.Error, OSError) as e:
            logger.error(f"Database initialization failed: {e}")
            raise StoreAccessError(f"Cannot open LevelDB at {db_path}: {e}") from e
        logger.info(f"Plyvel database initialized at {db_path}")

    def close(self) -> None:
        """Close the database connection"""
        if not self.db.closed:
            self.db.close()

    def get(self, key: bytes) -> Optional[bytes]:
        try:
            return self.db.get(key)
        except (plyvel.Error, RuntimeError) as e:
            raise StoreAccessError(f"Get failed for {key!r}: {e}") from e

    def put(self, key: bytes, value: bytes) -> None:
        try:
            self.db.put(key, value)
        except (plyvel.Error, RuntimeError) as e:
            raise StoreAccessError(f"Put failed for {key!r}: {e}") from e

    def delete(self, key: bytes) -> None:
        try:
            self.db.delete(key)
        except (plyvel.Error, RuntimeError) as e:
            raise StoreAccessError(f"Delete failed for {key!r}: {e}") from e

    def scan(self, prefix: bytes = b'') -> Iterator[Tuple[bytes, bytes]]:
        try:
            it = self.db.iterator(prefix=prefix) if prefix else self.db.iterator()
            with it:
                for key, value in it:
                    yield key, value
        except (plyvel.Error, RuntimeError) as e:
            raise StoreAccessError(f"Scan failed for prefix {prefix!r}: {e}") from e

    def write_batch(self, writes: Dict[bytes, Optional[bytes]]) -> None:
        try:
            with self.db.write_batch(transaction=True) as batch:
                for key, value in writes.items():
                    if value is None:
                        batch.delete(key)
                    else:
                        batch.put(key, value)
        except (plyvel.Error, RuntimeError) as e:
            raise StoreAccessError(f"Batch write failed: {e}") from e
