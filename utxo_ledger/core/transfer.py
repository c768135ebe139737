# utxo_ledger/core/transfer.py
from decimal import Decimal
from typing import Union

from utxo_ledger.core.selector import CoinSelector, OwnershipCheck
from utxo_ledger.core.scanner import is_spendable_by
from utxo_ledger.database.keys import utxo_key, transaction_key
from utxo_ledger.database.serialization import serialize_utxo, serialize_transaction
from utxo_ledger.database.store import LedgerStore
from utxo_ledger.exceptions import StructuralDecodeError
from utxo_ledger.models.utxo import UTXO, Direction
from utxo_ledger.models.transaction import Transaction
from utxo_ledger.utils.helpers import parse_amount, quantum
from utxo_ledger.utils.logging_config import logger

PAYMENT_INDEX = "1"
CHANGE_INDEX = "2"


def store_utxo(store: LedgerStore, utxo: UTXO) -> bytes:
    key = utxo_key(utxo.transaction_id, utxo.output_index)
    store.put(key, serialize_utxo(utxo))
    return key


def store_transaction(store: LedgerStore, transaction: Transaction) -> bytes:
    if not transaction.validate_structure():
        raise StructuralDecodeError(f"Malformed transaction {transaction.id!r}: refusing to persist")
    key = transaction_key(transaction.id)
    store.put(key, serialize_transaction(transaction))
    return key


class TransferEngine:

    @staticmethod
    def transfer(store: LedgerStore, from_address: str, to_address: str,
                 amount: Union[str, Decimal], transaction_id: str,
                 ownership: OwnershipCheck = is_spendable_by) -> Transaction:
        """
        Move `amount` from `from_address` to `to_address` as transaction
        `transaction_id`.

        Inputs are chosen by CoinSelector. Nothing is written unless the
        selection covers the amount. Spent UTXOs are deleted, the payment
        becomes output "1" and any surplus comes back to the sender as
        change output "2". Atomicity of the delete/put sequence belongs to
        whatever commits the store's writes.

        Raises:
            ArgumentFormatError: amount is malformed or not positive
            InsufficientFundsError: sender's spendable UTXOs do not cover amount
        """
        value = parse_amount(amount)
        selection = CoinSelector.select(store, from_address, value, ownership)

        inputs = [utxo.spent_as_input() for _, utxo in selection.chosen]
        outputs = [UTXO(transaction_id, PAYMENT_INDEX, value, to_address, Direction.OUT)]

        change = (selection.total - value).quantize(quantum())
        if change > 0:
            outputs.append(UTXO(transaction_id, CHANGE_INDEX, change, from_address, Direction.OUT))

        transaction = Transaction(transaction_id, inputs, outputs)
        store_transaction(store, transaction)

        for key in selection.keys:
            store.delete(key)
        for utxo in outputs:
            store_utxo(store, utxo)

        logger.info(
            f"Transfer {transaction_id}: {value} from {from_address} to {to_address} "
            f"({len(inputs)} inputs, change {change})"
        )
        return transaction
