"""
Tests for configuration loading.
"""

from decimal import Decimal

import pytest
from utxo_ledger.config.config_manager import ConfigManager, LedgerConfig, init_config
from utxo_ledger.exceptions import ArgumentFormatError


def test_defaults():
    """Defaults match the reference genesis."""
    manager = init_config()
    assert manager.get("ledger.genesis_amount") == Decimal("50")
    assert manager.get("ledger.genesis_address") == "User A"
    assert manager.get("ledger.coinbase_address") == "Coinbase"
    assert manager.get("database.create_if_missing") is True
    assert manager.get("ledger.nope", "fallback") == "fallback"


def test_yaml_overrides(tmp_path):
    """Sections in YAML override matching dataclass fields."""
    path = tmp_path / "ledger.yaml"
    path.write_text(
        "ledger:\n"
        "  genesis_amount: 12.5\n"
        "  genesis_address: Treasury\n"
        "database:\n"
        "  db_path: /tmp/ledger\n"
        "logging:\n"
        "  level: DEBUG\n"
        "  unknown_key: 1\n"
    )
    manager = ConfigManager(str(path))
    assert manager.config.ledger.genesis_amount == Decimal("12.5")
    assert manager.config.ledger.genesis_address == "Treasury"
    assert manager.get("database.db_path") == "/tmp/ledger"
    assert manager.get("logging.level") == "DEBUG"
    assert manager.get_all()["ledger"]["genesis_address"] == "Treasury"


def test_missing_file_uses_defaults(tmp_path):
    manager = ConfigManager(str(tmp_path / "absent.yaml"))
    assert manager.config.ledger.genesis_address == "User A"


def test_invalid_genesis_amount():
    with pytest.raises(ArgumentFormatError):
        LedgerConfig(genesis_amount="-3")
