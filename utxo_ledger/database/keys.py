# utxo_ledger/database/keys.py
from enum import Enum
from typing import Union
from utxo_ledger.exceptions import ArgumentFormatError, StructuralDecodeError

# Database key prefixes
UTXO_PREFIX = b'u:'
TRANSACTION_PREFIX = b't:'
OUTPOINT_SEPARATOR = ':'

class KeyKind(Enum):
    UTXO = "utxo"
    TRANSACTION = "transaction"

def utxo_key(transaction_id: str, output_index: str) -> bytes:
    return UTXO_PREFIX + f"{transaction_id}{OUTPOINT_SEPARATOR}{output_index}".encode('utf-8')

def transaction_key(transaction_id: str) -> bytes:
    return TRANSACTION_PREFIX + transaction_id.encode('utf-8')

def classify(key: bytes) -> KeyKind:
    """Classify a stored key by its type prefix"""
    if key.startswith(UTXO_PREFIX):
        return KeyKind.UTXO
    if key.startswith(TRANSACTION_PREFIX):
        return KeyKind.TRANSACTION
    raise StructuralDecodeError(f"Unrecognized key in ledger keyspace: {key!r}")

def outpoint_key(outpoint: Union[str, bytes]) -> bytes:
    """
    Store key for a logical 'txid:index' outpoint. A key that already
    carries the UTXO prefix is passed through unchanged.
    """
    if isinstance(outpoint, bytes):
        if outpoint.startswith(UTXO_PREFIX):
            return outpoint
        outpoint = outpoint.decode('utf-8')

    transaction_id, sep, output_index = outpoint.rpartition(OUTPOINT_SEPARATOR)
    if not sep or not transaction_id or not output_index.isdigit():
        raise ArgumentFormatError(f"UTXO key must look like 'txid:index', got {outpoint!r}")
    return utxo_key(transaction_id, output_index)

def display_key(key: bytes) -> str:
    """Caller-facing form of a stored key, with the type prefix removed"""
    kind = classify(key)
    prefix = UTXO_PREFIX if kind is KeyKind.UTXO else TRANSACTION_PREFIX
    return key[len(prefix):].decode('utf-8')
