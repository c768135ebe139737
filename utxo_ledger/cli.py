# utxo_ledger/cli.py
import argparse
import json
import sys
import uuid
from typing import List, Optional

from utxo_ledger.config.config_manager import init_config
from utxo_ledger.contract import UTXOContract, run_invocation
from utxo_ledger.database.store import PlyvelStore
from utxo_ledger.exceptions import StoreAccessError
from utxo_ledger.utils.logging_config import logger, setup_logging


def build_parser(functions: List[str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='utxo-ledger',
        description='Run one ledger operation against a LevelDB directory',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--config', help='YAML configuration file')
    parser.add_argument('--db', help='LevelDB directory (overrides database.db_path)')
    parser.add_argument('--txid', help='Transaction id for this invocation (default: random)')
    parser.add_argument('--log-level', help='Override logging.level')
    parser.add_argument('function', choices=functions, help='Ledger operation')
    parser.add_argument('args', nargs='*', help='Operation arguments')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    contract_functions = UTXOContract().functions
    args = build_parser(contract_functions).parse_args(argv)

    config_manager = init_config(args.config)
    config = config_manager.config
    setup_logging(
        level=args.log_level or config.logging.level,
        log_file=config.logging.file,
        max_bytes=config.logging.max_size,
        backup_count=config.logging.backup_count,
        enable_console=config.logging.console_enabled
    )

    db_path = args.db or config.database.db_path
    transaction_id = args.txid or uuid.uuid4().hex
    contract = UTXOContract(config.ledger)

    try:
        with PlyvelStore(db_path, create_if_missing=config.database.create_if_missing) as store:
            response = run_invocation(contract, store, args.function, args.args, transaction_id)
    except StoreAccessError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not response.ok:
        print(f"Error ({response.error_kind}): {response.message}", file=sys.stderr)
        return 1

    if response.payload:
        print(json.dumps(response.json(), indent=2))
    else:
        print(json.dumps({"status": "ok", "txid": transaction_id}))
    return 0


if __name__ == '__main__':
    sys.exit(main())
