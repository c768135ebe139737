"""
Tests for the ordered store backends.
"""

import pytest
from utxo_ledger.database.store import MemoryStore


def _exercise(store):
    store.put(b"u:b:1", b"2")
    store.put(b"u:a:1", b"1")
    store.put(b"t:a", b"3")

    assert store.get(b"u:a:1") == b"1"
    assert store.get(b"missing") is None

    # Ascending order across the whole keyspace
    assert [k for k, _ in store.scan_all()] == [b"t:a", b"u:a:1", b"u:b:1"]
    # Prefix scans stay inside their range
    assert [k for k, _ in store.scan(b"u:")] == [b"u:a:1", b"u:b:1"]
    assert [k for k, _ in store.scan(b"t:")] == [b"t:a"]

    store.delete(b"u:a:1")
    store.delete(b"never-there")
    assert store.get(b"u:a:1") is None

    store.write_batch({b"u:c:1": b"4", b"u:b:1": None})
    assert [k for k, _ in store.scan(b"u:")] == [b"u:c:1"]


def test_memory_store():
    """MemoryStore honours get/put/delete/scan/batch semantics."""
    _exercise(MemoryStore())


def test_memory_store_scan_is_lazy():
    """Breaking out of a scan leaves the rest of the range untouched."""
    store = MemoryStore({b"u:a:1": b"1", b"u:b:1": b"2"})
    it = store.scan(b"u:")
    assert next(it) == (b"u:a:1", b"1")
    # Mutation mid-scan does not break the iterator
    store.delete(b"u:b:1")
    assert list(it) == []


def test_plyvel_store(tmp_path):
    """PlyvelStore honours the same contract on LevelDB."""
    pytest.importorskip("plyvel")
    from utxo_ledger.database.store import PlyvelStore

    with PlyvelStore(str(tmp_path / "db")) as store:
        _exercise(store)

    # Data survives reopening
    with PlyvelStore(str(tmp_path / "db")) as store:
        assert store.get(b"u:c:1") == b"4"


def test_memory_store_prefix_bounds():
    """Prefix scans stop at the end of their range, including 0xff edges."""
    store = MemoryStore({
        b"t:a": b"1", b"t;": b"2", b"u:a:1": b"3",
        b"x\xff": b"4", b"x\xff\x00": b"5", b"y": b"6",
    })
    assert [k for k, _ in store.scan(b"t:")] == [b"t:a"]
    assert [k for k, _ in store.scan(b"x\xff")] == [b"x\xff", b"x\xff\x00"]
    assert [k for k, _ in store.scan(b"\xff")] == []
    assert len(list(store.scan_all())) == 6
