#rayonix_wallet/core/config.py
import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from rayonix_wallet.core.exceptions import ConfigError
from rayonix_wallet.core.sync_depth import SyncDepth

logger = logging.getLogger(__name__)

DEFAULT_SYNC_DEPTH = SyncDepth.FROM_LAST_TRUSTED_BLOCK

@dataclass
class WalletConfig:
    """Wallet configuration"""
    network: str = "mainnet"
    db_path: str = "wallet.db"
    sync_interval: int = 300
    sync_depth: SyncDepth = DEFAULT_SYNC_DEPTH
    trusted_block_height: int = 0
    creation_height: int = 0

    def __post_init__(self):
        """Initialize derived properties after object creation"""
        self.sync_depth = self._coerce_sync_depth(self.sync_depth)

        if self.sync_interval <= 0:
            raise ConfigError(f"sync_interval must be positive, got {self.sync_interval}")
        if self.creation_height < 0 or self.trusted_block_height < 0:
            raise ConfigError("Block heights must not be negative")

    @staticmethod
    def _coerce_sync_depth(value: Any) -> SyncDepth:
        """Turn a serialized sync depth (name or wire tag) back into the enum"""
        if isinstance(value, SyncDepth):
            return value

        depth = None
        if isinstance(value, str):
            depth = SyncDepth.from_name(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            depth = SyncDepth.from_serialization(value)

        if depth is None:
            raise ConfigError(f"Unknown sync depth: {value!r}")
        return depth

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary, sync depth as its wire tag"""
        data = asdict(self)
        data['sync_depth'] = self.sync_depth.to_serialization()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WalletConfig':
        known = {key: value for key, value in data.items() if key in cls.__dataclass_fields__}
        return cls(**known)

def load_wallet_config(config_path: Optional[Union[str, Path]] = None) -> WalletConfig:
    """Load wallet configuration from a YAML or JSON file"""
    if not config_path:
        return WalletConfig()

    config_file = Path(config_path)
    if not config_file.exists():
        logger.info(f"Config file {config_file} not found, using defaults")
        return WalletConfig()

    try:
        with open(config_file, 'r') as f:
            if config_file.suffix.lower() == '.json':
                config_data = json.load(f)
            else:
                config_data = yaml.safe_load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config file {config_file}: {e}") from e

    if not config_data:
        return WalletConfig()
    if not isinstance(config_data, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")

    # Wallet settings may sit under a 'wallet' section
    config_data = config_data.get('wallet', config_data)
    if not isinstance(config_data, dict):
        raise ConfigError(f"'wallet' section in {config_file} must be a mapping")

    if 'sync_depth' in config_data:
        try:
            WalletConfig._coerce_sync_depth(config_data['sync_depth'])
        except ConfigError:
            logger.warning(
                f"Unrecognized sync_depth {config_data['sync_depth']!r} in {config_file}, "
                f"falling back to {DEFAULT_SYNC_DEPTH.name}"
            )
            config_data = dict(config_data, sync_depth=DEFAULT_SYNC_DEPTH)

    try:
        return WalletConfig.from_dict(config_data)
    except TypeError as e:
        raise ConfigError(f"Invalid value in config file {config_file}: {e}") from e
