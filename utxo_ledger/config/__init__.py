# utxo_ledger/config/__init__.py
from utxo_ledger.config.config_manager import (
    Config, LedgerConfig, DatabaseConfig, LoggingConfig, ConfigManager, init_config
)

__all__ = ['Config', 'LedgerConfig', 'DatabaseConfig', 'LoggingConfig', 'ConfigManager', 'init_config']
