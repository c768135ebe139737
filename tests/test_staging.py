"""
Tests for the staged commit layer and invocation read/write sets.
"""

import pytest
from utxo_ledger.core.query import QueryEngine
from utxo_ledger.core.transfer import TransferEngine
from utxo_ledger.database.staging import StagedStore, staged
from utxo_ledger.exceptions import (
    ConcurrencyConflictError, InsufficientFundsError, StoreAccessError
)


def test_writes_are_buffered(seeded):
    """Nothing reaches the backing store before commit."""
    before = seeded.snapshot()
    stage = StagedStore(seeded)
    stage.put(b"u:new:1", b"x")
    stage.delete(b"u:tx0:1")

    assert seeded.snapshot() == before
    # Reads see the backing store, not the stage's own writes
    assert stage.get(b"u:new:1") is None
    assert stage.get(b"u:tx0:1") is not None

    stage.commit()
    assert seeded.get(b"u:new:1") == b"x"
    assert seeded.get(b"u:tx0:1") is None


def test_transfer_read_and_write_sets(two_owners):
    """A transfer reads exactly the keys it scanned and writes only what it changed."""
    stage = StagedStore(two_owners)
    TransferEngine.transfer(stage, "User A", "User C", "10", "tx7")

    # Selection stops at the first sufficient UTXO
    assert stage.read_set == {b"u:tx0:1"}
    assert set(stage.write_set) == {b"u:tx0:1", b"u:tx7:1", b"u:tx7:2", b"t:tx7"}
    assert stage.write_set[b"u:tx0:1"] is None

    stage = StagedStore(two_owners)
    TransferEngine.transfer(stage, "User B", "User C", "10", "tx8")
    # User A's UTXO sorts first and was scanned past
    assert stage.read_set == {b"u:tx0:1", b"u:tx5:1"}


def test_racing_spends_conflict(two_owners):
    """Two stages spending the same UTXO: the second commit is rejected."""
    first = StagedStore(two_owners)
    second = StagedStore(two_owners)
    TransferEngine.transfer(first, "User A", "User C", "10", "tx7")
    TransferEngine.transfer(second, "User A", "User D", "5", "tx8")

    first.commit()
    after_first = two_owners.snapshot()

    with pytest.raises(ConcurrencyConflictError):
        second.commit()
    assert two_owners.snapshot() == after_first
    assert QueryEngine.get_transaction(two_owners, "tx8") is None


def test_phantom_in_scanned_range(seeded):
    """A key inserted into a fully scanned range invalidates the stage."""
    stage = StagedStore(seeded)
    QueryEngine.list_all_utxos(stage)
    stage.put(b"t:marker", b"x")

    seeded.put(b"u:zzz:1", b"y")
    with pytest.raises(ConcurrencyConflictError):
        stage.commit()
    assert seeded.get(b"t:marker") is None


def test_unrelated_write_does_not_conflict(two_owners):
    """Writes outside what the stage read leave it committable."""
    stage = StagedStore(two_owners)
    TransferEngine.transfer(stage, "User A", "User C", "10", "tx7")

    # Sorts after the last key the selection consumed
    two_owners.put(b"t:unrelated", b"x")
    stage.commit()
    assert QueryEngine.get_transaction(two_owners, "tx7") is not None


def test_staged_context_manager(seeded):
    """The context manager commits on success and discards on error."""
    before = seeded.snapshot()
    with pytest.raises(InsufficientFundsError):
        with staged(seeded) as stage:
            TransferEngine.transfer(stage, "User A", "User B", "500", "tx1")
    assert seeded.snapshot() == before

    with staged(seeded) as stage:
        TransferEngine.transfer(stage, "User A", "User B", "20", "tx1")
    assert QueryEngine.get_balance(seeded, "User B") == 20


def test_closed_stage_refuses_use(seeded):
    """Committed or discarded stages cannot be reused."""
    stage = StagedStore(seeded)
    stage.commit()
    with pytest.raises(StoreAccessError):
        stage.put(b"k", b"v")

    stage = StagedStore(seeded)
    stage.discard()
    with pytest.raises(StoreAccessError):
        stage.get(b"k")
