from .synchronizer import WalletSynchronizer, SyncEvent, SyncEventType

__all__ = [
    'WalletSynchronizer',
    'SyncEvent',
    'SyncEventType'
]
