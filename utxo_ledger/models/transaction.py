# utxo_ledger/models/transaction.py
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Dict, Any
from utxo_ledger.models.utxo import UTXO, Direction


@dataclass
class Transaction:
    """
    Immutable record of one value movement.

    Inputs and outputs are embedded copies of the UTXOs involved, so a
    transaction stays readable after its inputs have been deleted from the
    live index.
    """
    id: str
    inputs: List[UTXO] = field(default_factory=list)
    outputs: List[UTXO] = field(default_factory=list)

    def input_total(self) -> Decimal:
        return sum((utxo.amount for utxo in self.inputs), Decimal(0))

    def output_total(self) -> Decimal:
        return sum((utxo.amount for utxo in self.outputs), Decimal(0))

    def is_coinbase(self) -> bool:
        return len(self.inputs) == 1 and self.inputs[0].is_coinbase()

    def validate_structure(self) -> bool:
        """Inputs must be tagged 'in', outputs 'out' and created by this transaction"""
        if not self.outputs:
            return False
        if any(utxo.direction is not Direction.IN for utxo in self.inputs):
            return False
        for utxo in self.outputs:
            if utxo.direction is not Direction.OUT or utxo.transaction_id != self.id:
                return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'input': [utxo.to_dict() for utxo in self.inputs],
            'output': [utxo.to_dict() for utxo in self.outputs]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Transaction':
        return cls(
            id=data['id'],
            inputs=[UTXO.from_dict(item) for item in data.get('input') or []],
            outputs=[UTXO.from_dict(item) for item in data.get('output') or []]
        )
