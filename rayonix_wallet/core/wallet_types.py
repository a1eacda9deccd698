# rayonix_wallet/core/wallet_types.py
from dataclasses import dataclass, field
from typing import Dict, Optional, Any

@dataclass
class Transaction:
    """Wallet transaction"""
    txid: str
    amount: int
    fee: int
    confirmations: int
    timestamp: int
    block_height: Optional[int]
    from_address: str
    to_address: str
    status: str
    direction: str
    memo: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_confirmed_send(self) -> bool:
        return (self.direction == 'out'
                and self.confirmations > 0
                and self.block_height is not None)

@dataclass
class WalletState:
    """Wallet state and statistics"""
    sync_height: int = 0
    last_updated: float = 0.0
    tx_count: int = 0
    total_received: int = 0
    total_sent: int = 0
