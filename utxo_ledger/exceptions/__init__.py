# utxo_ledger/exceptions/__init__.py
from utxo_ledger.exceptions.custom_errors import (
    LedgerError,
    ArgumentCountError,
    ArgumentFormatError,
    InsufficientFundsError,
    StoreAccessError,
    ConcurrencyConflictError,
    StructuralDecodeError,
    UnknownFunctionError
)

__all__ = [
    'LedgerError',
    'ArgumentCountError',
    'ArgumentFormatError',
    'InsufficientFundsError',
    'StoreAccessError',
    'ConcurrencyConflictError',
    'StructuralDecodeError',
    'UnknownFunctionError'
]
