# utxo_ledger/core/scanner.py
from typing import Callable, Iterator, Optional, Tuple, Union

from utxo_ledger.database.keys import KeyKind, UTXO_PREFIX, TRANSACTION_PREFIX, classify
from utxo_ledger.database.serialization import deserialize_utxo, deserialize_transaction
from utxo_ledger.database.store import LedgerStore
from utxo_ledger.exceptions import StructuralDecodeError
from utxo_ledger.models.utxo import UTXO, Direction
from utxo_ledger.models.transaction import Transaction

UTXOPredicate = Callable[[UTXO], bool]


def is_spendable_by(utxo: UTXO, address: str) -> bool:
    """
    Ownership check. Only live records are scanned, so a record owned by
    `address` and tagged 'out' is spendable. There is no signature check:
    the address is an opaque string compared for equality.
    """
    return utxo.address == address and utxo.direction is Direction.OUT


def for_each_utxo(store: LedgerStore,
                  predicate: Optional[UTXOPredicate] = None) -> Iterator[Tuple[bytes, UTXO]]:
    """Lazily yield (key, UTXO) in ascending key order, filtered by `predicate`"""
    for key, value in store.scan(UTXO_PREFIX):
        if classify(key) is not KeyKind.UTXO:
            raise StructuralDecodeError(f"Non-UTXO key {key!r} inside UTXO range")
        utxo = deserialize_utxo(value)
        if predicate is None or predicate(utxo):
            yield key, utxo


def for_each_transaction(store: LedgerStore) -> Iterator[Tuple[bytes, Transaction]]:
    for key, value in store.scan(TRANSACTION_PREFIX):
        if classify(key) is not KeyKind.TRANSACTION:
            raise StructuralDecodeError(f"Non-transaction key {key!r} inside transaction range")
        yield key, deserialize_transaction(value)


def entries(store: LedgerStore) -> Iterator[Tuple[KeyKind, bytes, Union[UTXO, Transaction]]]:
    """Full-range scan, classifying and decoding every entry"""
    for key, value in store.scan_all():
        kind = classify(key)
        if kind is KeyKind.UTXO:
            yield kind, key, deserialize_utxo(value)
        else:
            yield kind, key, deserialize_transaction(value)
