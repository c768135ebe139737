# utxo_ledger/exceptions/custom_errors.py
class LedgerError(Exception):
    """Base class for every failure surfaced to the caller"""
    kind = "LedgerError"

class ArgumentCountError(LedgerError):
    """Raised when an operation receives the wrong number of arguments"""
    kind = "ArgumentCountError"

    def __init__(self, expected: int, received: int = None):
        self.expected = expected
        self.received = received
        super().__init__(f"Incorrect number of arguments. Expecting {expected}")

class ArgumentFormatError(LedgerError):
    """Raised when an argument cannot be parsed (e.g. non-numeric amount)"""
    kind = "ArgumentFormatError"

class InsufficientFundsError(LedgerError):
    """Raised when there are insufficient funds for a transaction"""
    kind = "InsufficientFundsError"

    def __init__(self, address: str, required, available):
        self.address = address
        self.required = required
        self.available = available
        super().__init__(
            f"No enough amount to spend: {address} holds {available}, needs {required}"
        )

class StoreAccessError(LedgerError):
    """Raised when the underlying get/put/delete/scan fails"""
    kind = "StoreAccessError"

class ConcurrencyConflictError(StoreAccessError):
    """Raised when a staged invocation read data that changed before commit"""
    kind = "ConcurrencyConflictError"

class StructuralDecodeError(LedgerError):
    """Raised when a stored record does not match the shape its key implies"""
    kind = "StructuralDecodeError"

class UnknownFunctionError(LedgerError):
    """Raised when the host asks for an operation the contract does not expose"""
    kind = "UnknownFunctionError"
