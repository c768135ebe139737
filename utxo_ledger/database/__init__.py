# utxo_ledger/database/__init__.py
from utxo_ledger.database.keys import (
    KeyKind, UTXO_PREFIX, TRANSACTION_PREFIX,
    utxo_key, transaction_key, classify, outpoint_key, display_key
)
from utxo_ledger.database.serialization import (
    serialize_utxo, deserialize_utxo, serialize_transaction, deserialize_transaction
)
from utxo_ledger.database.store import LedgerStore, MemoryStore, PlyvelStore
from utxo_ledger.database.staging import StagedStore, staged

__all__ = [
    'KeyKind', 'UTXO_PREFIX', 'TRANSACTION_PREFIX',
    'utxo_key', 'transaction_key', 'classify', 'outpoint_key', 'display_key',
    'serialize_utxo', 'deserialize_utxo', 'serialize_transaction', 'deserialize_transaction',
    'LedgerStore', 'MemoryStore', 'PlyvelStore', 'StagedStore', 'staged'
]
