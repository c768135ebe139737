# utxo_ledger/models/__init__.py
from utxo_ledger.models.utxo import UTXO, Direction, COINBASE_INDEX
from utxo_ledger.models.transaction import Transaction

__all__ = ['UTXO', 'Direction', 'COINBASE_INDEX', 'Transaction']
