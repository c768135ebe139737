# utxo_ledger/utils/helpers.py
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Union
from utxo_ledger.exceptions import ArgumentFormatError

DEFAULT_PRECISION = 2

def quantum(precision: int = DEFAULT_PRECISION) -> Decimal:
    """Smallest representable unit for the given number of decimal places"""
    return Decimal(1).scaleb(-precision)

def parse_amount(text: Union[str, int, Decimal], precision: int = DEFAULT_PRECISION) -> Decimal:
    """
    Parse a caller-supplied amount into a Decimal.

    Rejects anything that is not a finite number, is not strictly positive,
    or carries more fractional digits than the ledger stores.
    """
    if isinstance(text, float):
        raise ArgumentFormatError(f"Amount must be given as text, not float: {text!r}")
    try:
        amount = Decimal(str(text).strip())
    except (InvalidOperation, ValueError):
        raise ArgumentFormatError(f"Amount is not a number: {text!r}")

    if not amount.is_finite():
        raise ArgumentFormatError(f"Amount is not a finite number: {text!r}")
    if amount <= 0:
        raise ArgumentFormatError(f"Amount must be positive: {text!r}")
    try:
        rounded = amount.quantize(quantum(precision), rounding=ROUND_HALF_EVEN)
    except InvalidOperation as e:
        # More digits than the decimal context can hold
        raise ArgumentFormatError(f"Amount is out of range: {text!r}") from e
    if amount != rounded:
        raise ArgumentFormatError(
            f"Amount has more than {precision} decimal places: {text!r}"
        )
    return amount

def format_amount(amount: Decimal, precision: int = DEFAULT_PRECISION) -> str:
    """Canonical text form of an amount, fixed to `precision` decimal places"""
    try:
        return str(Decimal(amount).quantize(quantum(precision), rounding=ROUND_HALF_EVEN))
    except InvalidOperation as e:
        raise ArgumentFormatError(f"Amount is out of range: {amount!r}") from e

def decode_amount(text: str) -> Decimal:
    """Inverse of format_amount for persisted records"""
    try:
        amount = Decimal(text)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"Invalid stored amount: {text!r}")
    if not amount.is_finite():
        raise ValueError(f"Invalid stored amount: {text!r}")
    return amount
