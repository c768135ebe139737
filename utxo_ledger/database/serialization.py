# utxo_ledger/database/serialization.py
import msgpack
from typing import Any
from utxo_ledger.models.utxo import UTXO
from utxo_ledger.models.transaction import Transaction
from utxo_ledger.exceptions import StructuralDecodeError

def _pack(value: Any) -> bytes:
    return msgpack.packb(value, use_bin_type=True)

def _unpack(data: bytes, what: str) -> dict:
    try:
        value = msgpack.unpackb(data, raw=False)
    except (msgpack.UnpackException, ValueError) as e:
        raise StructuralDecodeError(f"{what} record is not valid MessagePack: {e}") from e
    if not isinstance(value, dict):
        raise StructuralDecodeError(f"{what} record must be a map, got {type(value).__name__}")
    return value

def serialize_utxo(utxo: UTXO) -> bytes:
    """Serialize UTXO to bytes for storage"""
    return _pack(utxo.to_dict())

def deserialize_utxo(data: bytes) -> UTXO:
    """Deserialize UTXO from bytes"""
    try:
        return UTXO.from_dict(_unpack(data, "UTXO"))
    except (KeyError, TypeError, ValueError) as e:
        raise StructuralDecodeError(f"Malformed UTXO record: {e!r}") from e

def serialize_transaction(transaction: Transaction) -> bytes:
    """Serialize Transaction to bytes for storage"""
    return _pack(transaction.to_dict())

def deserialize_transaction(data: bytes) -> Transaction:
    """Deserialize Transaction from bytes"""
    try:
        return Transaction.from_dict(_unpack(data, "Transaction"))
    except (KeyError, TypeError, ValueError) as e:
        raise StructuralDecodeError(f"Malformed Transaction record: {e!r}") from e
