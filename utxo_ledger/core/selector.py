# utxo_ledger/core/selector.py
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, List, Tuple

from utxo_ledger.core.scanner import for_each_utxo, is_spendable_by
from utxo_ledger.database.store import LedgerStore
from utxo_ledger.exceptions import InsufficientFundsError
from utxo_ledger.models.utxo import UTXO
from utxo_ledger.utils.logging_config import logger

OwnershipCheck = Callable[[UTXO, str], bool]


@dataclass
class Selection:
    chosen: List[Tuple[bytes, UTXO]] = field(default_factory=list)
    total: Decimal = Decimal(0)

    @property
    def keys(self) -> List[bytes]:
        return [key for key, _ in self.chosen]


class CoinSelector:
    """
    First-fit greedy selection in store iteration order.

    Not amount-sorted and not minimal: UTXOs are taken in ascending key
    order until their running total covers the target, which keeps the
    result reproducible for a given ledger state.
    """

    @staticmethod
    def select(store: LedgerStore, address: str, target: Decimal,
               ownership: OwnershipCheck = is_spendable_by) -> Selection:
        selection = Selection()
        candidates = for_each_utxo(store, lambda utxo: ownership(utxo, address))

        for key, utxo in candidates:
            selection.chosen.append((key, utxo))
            selection.total += utxo.amount
            if selection.total >= target:
                break
        # Stop the scan here so the read set ends at the last chosen key
        candidates.close()

        if selection.total < target:
            raise InsufficientFundsError(address, target, selection.total)

        logger.debug(
            f"Selected {len(selection.chosen)} UTXOs worth {selection.total} "
            f"for {address} (target {target})"
        )
        return selection
