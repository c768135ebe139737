# utxo_ledger/config/config_manager.py
from dataclasses import dataclass, field, asdict
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from utxo_ledger.utils.helpers import parse_amount
from utxo_ledger.utils.logging_config import logger


@dataclass
class LedgerConfig:
    """Genesis parameters"""
    genesis_amount: Decimal = Decimal("50")
    genesis_address: str = "User A"
    coinbase_address: str = "Coinbase"

    def __post_init__(self):
        self.genesis_amount = parse_amount(self.genesis_amount)


@dataclass
class DatabaseConfig:
    db_path: str = "./utxo_ledger_db"
    create_if_missing: bool = True


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None
    max_size: int = 10485760  # 10MB
    backup_count: int = 5
    console_enabled: bool = True


@dataclass
class Config:
    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigManager:
    SECTIONS = ('ledger', 'database', 'logging')

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.config = Config()
        self._load_config()

    def _load_config(self):
        """Load configuration from file"""
        if not self.config_path:
            return

        config_file = Path(self.config_path)
        if not config_file.exists():
            logger.warning(f"Config file {config_file} not found, using defaults")
            return

        with open(config_file, 'r') as f:
            config_data = yaml.safe_load(f) or {}
        self._update_config_from_dict(config_data)

    def _update_config_from_dict(self, config_data: Dict[str, Any]):
        """Update config from dictionary"""
        for section in self.SECTIONS:
            if section not in config_data:
                continue
            section_config = getattr(self.config, section)
            for key, value in (config_data[section] or {}).items():
                if hasattr(section_config, key):
                    setattr(section_config, key, value)
                else:
                    logger.warning(f"Ignoring unknown config key {section}.{key}")

        # Amounts from YAML arrive as int/float/str
        self.config.ledger.genesis_amount = parse_amount(str(self.config.ledger.genesis_amount))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation"""
        obj = self.config
        for part in key.split('.'):
            if not hasattr(obj, part):
                return default
            obj = getattr(obj, part)
        return obj

    def get_all(self) -> Dict[str, Any]:
        """Get all configuration as dictionary"""
        return asdict(self.config)


def init_config(config_path: Optional[str] = None) -> ConfigManager:
    """Initialize configuration manager"""
    return ConfigManager(config_path)
