class WalletError(Exception):
    """Base exception for wallet errors"""
    pass

class ConfigError(WalletError):
    """Configuration errors"""
    pass

class SerializationError(WalletError):
    """Persisted data could not be encoded or decoded"""
    pass

class SyncError(WalletError):
    """Synchronization errors"""
    pass

class UnrecognizedSyncDepthError(SyncError):
    """Wire tag does not name a known sync depth"""

    def __init__(self, tag):
        self.tag = tag
        if isinstance(tag, int) and tag >= 0:
            message = f"Unrecognized sync depth tag: 0x{tag:02X}"
        else:
            message = f"Unrecognized sync depth tag: {tag!r}"
        super().__init__(message)
