from .blockchain import BlockchainInterface

__all__ = [
    'BlockchainInterface'
]
