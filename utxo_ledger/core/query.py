# utxo_ledger/core/query.py
from decimal import Decimal
from typing import List, Optional, Tuple, Union

from utxo_ledger.core.scanner import for_each_utxo, for_each_transaction, is_spendable_by
from utxo_ledger.database.keys import outpoint_key, transaction_key, display_key
from utxo_ledger.database.serialization import deserialize_utxo, deserialize_transaction
from utxo_ledger.database.store import LedgerStore
from utxo_ledger.models.utxo import UTXO
from utxo_ledger.models.transaction import Transaction
from utxo_ledger.exceptions import ArgumentFormatError
from utxo_ledger.utils.logging_config import logger


class QueryEngine:
    """Read-only projections. Listings keep ascending store-key order."""

    @staticmethod
    def get_utxo(store: LedgerStore, key: Union[str, bytes]) -> Optional[UTXO]:
        """A key not shaped 'txid:index' can never name a UTXO, so it is absent"""
        try:
            store_key = outpoint_key(key)
        except ArgumentFormatError as e:
            logger.debug(f"UTXO lookup for non-outpoint key: {e}")
            return None
        data = store.get(store_key)
        return deserialize_utxo(data) if data is not None else None

    @staticmethod
    def get_transaction(store: LedgerStore, transaction_id: str) -> Optional[Transaction]:
        data = store.get(transaction_key(transaction_id))
        return deserialize_transaction(data) if data is not None else None

    @staticmethod
    def list_all_utxos(store: LedgerStore) -> List[Tuple[str, UTXO]]:
        return [(display_key(key), utxo) for key, utxo in for_each_utxo(store)]

    @staticmethod
    def list_all_transactions(store: LedgerStore) -> List[Tuple[str, Transaction]]:
        return [(display_key(key), tx) for key, tx in for_each_transaction(store)]

    @staticmethod
    def list_utxos_by_address(store: LedgerStore, address: str) -> List[Tuple[str, UTXO]]:
        owned = for_each_utxo(store, lambda utxo: is_spendable_by(utxo, address))
        return [(display_key(key), utxo) for key, utxo in owned]

    @staticmethod
    def get_balance(store: LedgerStore, address: str) -> Decimal:
        """Sum of the address's spendable UTXOs"""
        utxos = QueryEngine.list_utxos_by_address(store, address)
        return sum((utxo.amount for _, utxo in utxos), Decimal(0))
