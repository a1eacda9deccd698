from rayonix_wallet.core.sync_depth import SyncDepth, encode_sync_depth, decode_sync_depth
from rayonix_wallet.core.config import WalletConfig, load_wallet_config
from rayonix_wallet.core.exceptions import UnrecognizedSyncDepthError
from rayonix_wallet.services.synchronizer import WalletSynchronizer
from rayonix_wallet.storage.serialization import pack_sync_depth, unpack_sync_depth

__version__ = "1.0.0"
__all__ = [
    'SyncDepth',
    'encode_sync_depth',
    'decode_sync_depth',
    'WalletConfig',
    'load_wallet_config',
    'UnrecognizedSyncDepthError',
    'WalletSynchronizer',
    'pack_sync_depth',
    'unpack_sync_depth'
]
