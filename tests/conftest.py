"""
Shared fixtures for the ledger tests.
"""

import pytest
from utxo_ledger.config.config_manager import LedgerConfig
from utxo_ledger.core.genesis import initialize
from utxo_ledger.database.store import MemoryStore


@pytest.fixture
def store():
    """Create an empty in-memory ordered store for each test."""
    return MemoryStore()


@pytest.fixture
def seeded(store):
    """Store after genesis 'tx0': 50 granted to 'User A'."""
    initialize(store, "tx0")
    return store


@pytest.fixture
def two_owners(seeded):
    """Genesis for 'User A' (tx0) and a second coinbase for 'User B' (tx5)."""
    initialize(seeded, "tx5", LedgerConfig(genesis_address="User B"))
    return seeded
