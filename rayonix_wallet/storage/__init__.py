from .serialization import WalletConfigSerializer, pack_sync_depth, unpack_sync_depth

__all__ = [
    'WalletConfigSerializer',
    'pack_sync_depth',
    'unpack_sync_depth'
]
