"""
Tests for the key codec.
"""

import pytest
from utxo_ledger.database.keys import (
    KeyKind, utxo_key, transaction_key, classify, outpoint_key, display_key
)
from utxo_ledger.exceptions import ArgumentFormatError, StructuralDecodeError


def test_key_shapes():
    """UTXO and transaction keys carry distinct type prefixes."""
    assert utxo_key("tx1", "2") == b"u:tx1:2"
    assert transaction_key("tx1") == b"t:tx1"


def test_classify():
    """Classification is by prefix only."""
    assert classify(b"u:tx1:1") is KeyKind.UTXO
    assert classify(b"t:tx1") is KeyKind.TRANSACTION

    # A transaction id containing the outpoint separator is still a transaction
    assert classify(transaction_key("a:b")) is KeyKind.TRANSACTION

    with pytest.raises(StructuralDecodeError):
        classify(b"x:whatever")


def test_outpoint_key_parsing():
    """Logical 'txid:index' keys map to UTXO store keys."""
    assert outpoint_key("tx1:1") == b"u:tx1:1"
    assert outpoint_key("a:b:4294967295") == b"u:a:b:4294967295"
    assert outpoint_key(b"tx1:1") == b"u:tx1:1"
    # Already a store key
    assert outpoint_key(b"u:tx1:1") == b"u:tx1:1"

    for bad in ("tx1", "tx1:", ":1", "tx1:one"):
        with pytest.raises(ArgumentFormatError):
            outpoint_key(bad)


def test_display_key():
    """Display keys drop the type prefix."""
    assert display_key(b"u:tx1:2") == "tx1:2"
    assert display_key(b"t:a:b") == "a:b"
