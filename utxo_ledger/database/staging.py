# utxo_ledger/database/staging.py
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple

from utxo_ledger.database.store import LedgerStore
from utxo_ledger.exceptions import ConcurrencyConflictError, StoreAccessError
from utxo_ledger.utils.logging_config import logger


@dataclass
class RangeRead:
    """Entries one scan actually handed to its consumer"""
    prefix: bytes
    entries: List[Tuple[bytes, bytes]] = field(default_factory=list)
    exhausted: bool = False

    @property
    def last_key(self) -> Optional[bytes]:
        return self.entries[-1][0] if self.entries else None


class StagedStore(LedgerStore):
    """
    One invocation's view over a backing store.

    Reads go straight to the backing store (an invocation never observes
    its own writes) and are recorded; writes are buffered until commit.
    Commit re-validates everything that was read and applies the buffered
    writes in a single batch, or raises ConcurrencyConflictError and
    applies nothing.
    """

    OPEN = "open"
    COMMITTED = "committed"
    DISCARDED = "discarded"

    def __init__(self, backing: LedgerStore):
        super().__init__()
        self.backing = backing
        self.state = self.OPEN
        self._point_reads: Dict[bytes, Optional[bytes]] = {}
        self._range_reads: List[RangeRead] = []
        self._writes: Dict[bytes, Optional[bytes]] = {}

    def _ensure_open(self):
        if self.state != self.OPEN:
            raise StoreAccessError(f"Stage already {self.state}")

    def get(self, key: bytes) -> Optional[bytes]:
        self._ensure_open()
        value = self.backing.get(key)
        self._point_reads.setdefault(key, value)
        return value

    def put(self, key: bytes, value: bytes) -> None:
        self._ensure_open()
        self._writes[key] = value

    def delete(self, key: bytes) -> None:
        self._ensure_open()
        self._writes[key] = None

    def scan(self, prefix: bytes = b'') -> Iterator[Tuple[bytes, bytes]]:
        self._ensure_open()
        record = RangeRead(prefix)
        self._range_reads.append(record)
        for key, value in self.backing.scan(prefix):
            record.entries.append((key, value))
            yield key, value
        record.exhausted = True

    def write_batch(self, writes: Dict[bytes, Optional[bytes]]) -> None:
        self._ensure_open()
        self._writes.update(writes)

    @property
    def read_set(self) -> Set[bytes]:
        keys = set(self._point_reads)
        for record in self._range_reads:
            keys.update(key for key, _ in record.entries)
        return keys

    @property
    def write_set(self) -> Dict[bytes, Optional[bytes]]:
        return dict(self._writes)

    def _validate(self) -> None:
        for key, value in self._point_reads.items():
            if self.backing.get(key) != value:
                raise ConcurrencyConflictError(f"Key {key!r} changed since it was read")

        for record in self._range_reads:
            if not record.exhausted and not record.entries:
                continue
            last_key = record.last_key
            current = []
            for key, value in self.backing.scan(record.prefix):
                if not record.exhausted and key > last_key:
                    break
                current.append((key, value))
            if current != record.entries:
                raise ConcurrencyConflictError(
                    f"Range {record.prefix!r} changed since it was scanned"
                )

    def commit(self) -> Dict[bytes, Optional[bytes]]:
        """Validate the read set and apply the write set atomically"""
        self._ensure_open()
        with self.backing.lock:
            try:
                self._validate()
            except ConcurrencyConflictError as e:
                self.state = self.DISCARDED
                logger.warning(f"Commit rejected: {e}")
                raise
            self.backing.write_batch(self._writes)
        self.state = self.COMMITTED
        logger.debug(f"Committed {len(self._writes)} writes against {len(self.read_set)} reads")
        return self.write_set

    def discard(self) -> None:
        if self.state == self.OPEN:
            self._writes.clear()
            self.state = self.DISCARDED


@contextmanager
def staged(backing: LedgerStore):
    """Context manager for one all-or-nothing invocation against `backing`"""
    stage = StagedStore(backing)
    try:
        yield stage
    except BaseException:
        stage.discard()
        raise
    if stage.state == StagedStore.OPEN:
        stage.commit()
