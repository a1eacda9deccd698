from abc import ABC, abstractmethod
from typing import Dict, List, Optional

class BlockchainInterface(ABC):
    """Abstract base class for blockchain interfaces"""

    @abstractmethod
    def get_block_height(self) -> int:
        """Get current blockchain height"""
        pass

    @abstractmethod
    def get_trusted_block_height(self) -> Optional[int]:
        """Height of the most recent block this chain considers trusted.

        What counts as trusted (checkpoint, finality, confirmation depth)
        is up to the implementation. None means no trusted block is known.
        """
        pass

    @abstractmethod
    def get_transactions_since(self, addresses: List[str], from_height: int) -> List[Dict]:
        """Get transactions touching any of the addresses at or above from_height"""
        pass
