# utxo_ledger/core/__init__.py
from utxo_ledger.core.scanner import is_spendable_by, for_each_utxo, for_each_transaction, entries
from utxo_ledger.core.selector import CoinSelector, Selection
from utxo_ledger.core.transfer import TransferEngine
from utxo_ledger.core.genesis import initialize
from utxo_ledger.core.query import QueryEngine

__all__ = [
    'is_spendable_by', 'for_each_utxo', 'for_each_transaction', 'entries',
    'CoinSelector', 'Selection', 'TransferEngine', 'initialize', 'QueryEngine'
]
