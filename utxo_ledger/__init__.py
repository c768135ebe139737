# utxo_ledger/__init__.py
from utxo_ledger.models import UTXO, Direction, Transaction, COINBASE_INDEX
from utxo_ledger.database import LedgerStore, MemoryStore, PlyvelStore, StagedStore, staged
from utxo_ledger.core import CoinSelector, TransferEngine, QueryEngine, initialize, is_spendable_by
from utxo_ledger.contract import UTXOContract, Response, run_invocation
from utxo_ledger.exceptions import (
    LedgerError,
    ArgumentCountError,
    ArgumentFormatError,
    InsufficientFundsError,
    StoreAccessError,
    ConcurrencyConflictError,
    StructuralDecodeError,
    UnknownFunctionError
)

__version__ = "1.0.0"
__all__ = [
    'UTXO',
    'Direction',
    'Transaction',
    'COINBASE_INDEX',
    'LedgerStore',
    'MemoryStore',
    'PlyvelStore',
    'StagedStore',
    'staged',
    'CoinSelector',
    'TransferEngine',
    'QueryEngine',
    'initialize',
    'is_spendable_by',
    'UTXOContract',
    'Response',
    'run_invocation',
    'LedgerError',
    'ArgumentCountError',
    'ArgumentFormatError',
    'InsufficientFundsError',
    'StoreAccessError',
    'ConcurrencyConflictError',
    'StructuralDecodeError',
    'UnknownFunctionError'
]
