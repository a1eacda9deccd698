from .sync_depth import SyncDepth, encode_sync_depth, decode_sync_depth
from .config import WalletConfig, load_wallet_config
from .wallet_types import Transaction, WalletState
from .exceptions import WalletError, ConfigError, SerializationError, SyncError, UnrecognizedSyncDepthError

__all__ = [
    'SyncDepth',
    'encode_sync_depth',
    'decode_sync_depth',
    'WalletConfig',
    'load_wallet_config',
    'Transaction',
    'WalletState',
    'WalletError',
    'ConfigError',
    'SerializationError',
    'SyncError',
    'UnrecognizedSyncDepthError'
]
