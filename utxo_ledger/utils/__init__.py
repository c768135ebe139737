# utxo_ledger/utils/__init__.py
from utxo_ledger.utils.logging_config import logger, setup_logging
from utxo_ledger.utils.helpers import parse_amount, format_amount, decode_amount, quantum

__all__ = ['logger', 'setup_logging', 'parse_amount', 'format_amount', 'decode_amount', 'quantum']
