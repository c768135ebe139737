# utxo_ledger/core/genesis.py
from decimal import Decimal
from typing import Optional

from utxo_ledger.config.config_manager import LedgerConfig
from utxo_ledger.core.transfer import store_utxo, store_transaction, PAYMENT_INDEX
from utxo_ledger.database.store import LedgerStore
from utxo_ledger.models.utxo import UTXO, Direction, COINBASE_INDEX
from utxo_ledger.models.transaction import Transaction
from utxo_ledger.utils.logging_config import logger


def initialize(store: LedgerStore, transaction_id: str,
               config: Optional[LedgerConfig] = None) -> Transaction:
    """
    Seed the ledger with one coinbase transaction.

    The coinbase input is never indexed, so only the output lands in the
    live UTXO range. Running it again with a new id mints again.
    """
    config = config or LedgerConfig()
    amount = Decimal(config.genesis_amount)

    coinbase = UTXO(transaction_id, COINBASE_INDEX, amount, config.coinbase_address, Direction.IN)
    output = UTXO(transaction_id, PAYMENT_INDEX, amount, config.genesis_address, Direction.OUT)
    transaction = Transaction(transaction_id, [coinbase], [output])

    store_transaction(store, transaction)
    store_utxo(store, output)

    logger.info(f"Genesis {transaction_id}: minted {amount} to {config.genesis_address}")
    return transaction
