# utxo_ledger/contract.py
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from utxo_ledger.config.config_manager import LedgerConfig
from utxo_ledger.core.genesis import initialize
from utxo_ledger.core.query import QueryEngine
from utxo_ledger.core.transfer import TransferEngine
from utxo_ledger.database.staging import StagedStore
from utxo_ledger.database.store import LedgerStore
from utxo_ledger.exceptions import (
    ArgumentCountError, LedgerError, StoreAccessError, UnknownFunctionError
)
from utxo_ledger.utils.logging_config import logger

OK = 200
ERROR = 500


@dataclass
class Response:
    status: int
    message: str = ""
    payload: Optional[bytes] = None
    error_kind: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == OK

    @classmethod
    def success(cls, payload: Optional[bytes] = None) -> 'Response':
        return cls(status=OK, payload=payload)

    @classmethod
    def error(cls, message: str, kind: str = "LedgerError") -> 'Response':
        return cls(status=ERROR, message=message, error_kind=kind)

    def json(self) -> Any:
        return json.loads(self.payload) if self.payload else None


def _encode(value: Any) -> bytes:
    return json.dumps(value, separators=(',', ':')).encode('utf-8')


def _listing(pairs: Sequence[Tuple[str, Any]]) -> bytes:
    return _encode([{"Key": key, "Record": record.to_dict()} for key, record in pairs])


def _expect(args: Sequence[str], count: int) -> None:
    if len(args) != count:
        raise ArgumentCountError(count, len(args))


class UTXOContract:
    """
    Host-facing entry points. Holds no ledger state: every call gets the
    store it should operate on, plus the transaction id the host assigned
    to the invocation.
    """

    def __init__(self, config: Optional[LedgerConfig] = None):
        self.config = config or LedgerConfig()
        self._routes: Dict[str, Callable[[LedgerStore, List[str], str], Optional[bytes]]] = {
            'init': self._init_state,
            'queryUTXO': self._query_utxo,
            'queryUTXOByAddr': self._query_utxo_by_addr,
            'queryTransaction': self._query_transaction,
            'getAllUTXO': self._get_all_utxo,
            'getAllTransaction': self._get_all_transaction,
            'transferUTXO': self._transfer_utxo,
        }

    @property
    def functions(self) -> List[str]:
        return list(self._routes)

    def init(self, store: LedgerStore) -> Response:
        """Instantiation hook; seeding is the separate 'init' function"""
        return Response.success()

    def invoke(self, store: LedgerStore, function: str, args: Sequence[str],
               transaction_id: str) -> Response:
        try:
            handler = self._routes.get(function)
            if handler is None:
                raise UnknownFunctionError("Invalid Smart Contract function name.")
            return Response.success(handler(store, list(args), transaction_id))
        except LedgerError as e:
            logger.error(f"{function} failed ({e.kind}): {e}")
            return Response.error(str(e), e.kind)

    def _init_state(self, store, args, transaction_id):
        _expect(args, 0)
        initialize(store, transaction_id, self.config)
        return None

    def _query_utxo(self, store, args, transaction_id):
        _expect(args, 1)
        utxo = QueryEngine.get_utxo(store, args[0])
        return _encode(utxo.to_dict()) if utxo else None

    def _query_utxo_by_addr(self, store, args, transaction_id):
        _expect(args, 1)
        return _listing(QueryEngine.list_utxos_by_address(store, args[0]))

    def _query_transaction(self, store, args, transaction_id):
        _expect(args, 1)
        transaction = QueryEngine.get_transaction(store, args[0])
        return _encode(transaction.to_dict()) if transaction else None

    def _get_all_utxo(self, store, args, transaction_id):
        _expect(args, 0)
        return _listing(QueryEngine.list_all_utxos(store))

    def _get_all_transaction(self, store, args, transaction_id):
        _expect(args, 0)
        return _listing(QueryEngine.list_all_transactions(store))

    def _transfer_utxo(self, store, args, transaction_id):
        _expect(args, 3)
        from_address, to_address, amount = args
        TransferEngine.transfer(store, from_address, to_address, amount, transaction_id)
        return None


def run_invocation(contract: UTXOContract, backing: LedgerStore, function: str,
                   args: Sequence[str], transaction_id: str) -> Response:
    """
    Run one invocation the way a committing host would: against a stage
    over `backing`, committing its writes only when the call succeeded and
    nothing it read has changed in the meantime.
    """
    stage = StagedStore(backing)
    response = contract.invoke(stage, function, args, transaction_id)
    if not response.ok:
        stage.discard()
        return response
    try:
        stage.commit()
    except StoreAccessError as e:
        logger.error(f"{function} {transaction_id} not committed: {e}")
        return Response.error(str(e), e.kind)
    return response
