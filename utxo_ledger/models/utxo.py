# utxo_ledger/models/utxo.py
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Dict, Any
from utxo_ledger.utils.helpers import format_amount, decode_amount

# math.MaxUint32 as a string marks the synthetic coinbase input
COINBASE_INDEX = str(2 ** 32 - 1)

class Direction(Enum):
    IN = "in"
    OUT = "out"

@dataclass
class UTXO:
    transaction_id: str
    output_index: str
    amount: Decimal
    address: str
    direction: Direction = Direction.OUT

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            self.amount = decode_amount(str(self.amount))
        if not isinstance(self.direction, Direction):
            self.direction = Direction(self.direction)

    @property
    def key(self) -> str:
        """Logical outpoint, transaction id and output index joined by ':'"""
        return f"{self.transaction_id}:{self.output_index}"

    def is_coinbase(self) -> bool:
        return self.output_index == COINBASE_INDEX

    def spent_as_input(self) -> 'UTXO':
        """Copy of this output tagged as consumed, for a transaction's input list"""
        return replace(self, direction=Direction.IN)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'txid': self.transaction_id,
            'index': self.output_index,
            'amount': format_amount(self.amount),
            'address': self.address,
            'inOrOut': self.direction.value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UTXO':
        return cls(
            transaction_id=data['txid'],
            output_index=data['index'],
            amount=decode_amount(data['amount']),
            address=data['address'],
            direction=Direction(data['inOrOut'])
        )
