import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from rayonix_wallet.core.wallet_types import Transaction
from rayonix_wallet.core.exceptions import SyncError
from rayonix_wallet.core.sync_depth import SyncDepth
from rayonix_wallet.utils.logging import get_logger

logger = get_logger(__name__)

class SyncEventType(Enum):
    SYNC_STARTED = "sync_started"
    SYNC_STOPPED = "sync_stopped"
    SYNC_RECOMMENDED = "sync_recommended"
    BLOCK_HEIGHT_UPDATED = "block_height_updated"

@dataclass
class SyncEvent:
    """Event delivered to synchronizer listeners"""
    event_type: SyncEventType
    depth: Optional[SyncDepth] = None
    height: Optional[int] = None
    reason: Optional[str] = None
    timestamp: float = field(default_factory=time.time)

SyncListener = Callable[[SyncEvent], None]

class WalletSynchronizer:
    """Blockchain synchronization service"""

    def __init__(self, wallet):
        self.wallet = wallet
        self.running = False
        self.sync_thread = None
        self.last_sync_time = 0
        self.sync_interval = wallet.config.sync_interval
        self.current_block_height = 0
        self._listeners: List[SyncListener] = []
        self._sync_lock = threading.RLock()

    def add_listener(self, listener: SyncListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: SyncListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: SyncEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Sync listener failed", event_type=event.event_type.value)

    def start(self):
        """Start synchronization service"""
        if self.running:
            return

        self.running = True
        self.sync_thread = threading.Thread(target=self._sync_loop, daemon=True)
        self.sync_thread.start()

    def stop(self):
        """Stop synchronization service"""
        self.running = False
        if self.sync_thread:
            self.sync_thread.join(timeout=5.0)
            self.sync_thread = None

    def _sync_loop(self):
        while self.running:
            if time.time() - self.last_sync_time >= self.sync_interval:
                self.synchronize()
                self.last_sync_time = time.time()

            time.sleep(1)

    def _blockchain(self):
        blockchain = getattr(self.wallet, 'blockchain_interface', None)
        if blockchain is None:
            raise SyncError("Blockchain interface not available")
        return blockchain

    def resolve_start_height(self, depth: SyncDepth) -> int:
        """Block height a resync at the given depth starts from"""
        config = self.wallet.config
        creation_height = config.creation_height

        if depth is SyncDepth.FROM_CREATION:
            height = creation_height

        elif depth is SyncDepth.FROM_LAST_TRUSTED_BLOCK:
            trusted = self._blockchain().get_trusted_block_height()
            height = trusted if trusted is not None else config.trusted_block_height
            # Never skip blocks the wallet has not scanned yet
            if self.wallet.state.sync_height > 0:
                height = min(height, self.wallet.state.sync_height)

        elif depth is SyncDepth.FROM_LAST_CONFIRMED_SEND:
            send_heights = [
                tx.block_height for tx in self.wallet.transactions.values()
                if tx.is_confirmed_send
            ]
            height = max(send_heights) if send_heights else creation_height

        else:
            raise TypeError(f"Expected SyncDepth, got {type(depth).__name__}")

        return max(height, creation_height)

    def synchronize(self) -> bool:
        """Scan new blocks since the wallet's sync height"""
        with self._sync_lock:
            try:
                blockchain = self._blockchain()
                current_height = blockchain.get_block_height()
                self._set_block_height(current_height)

                if current_height < self.wallet.state.sync_height:
                    # Chain went backwards; wallet history above the tip is suspect
                    logger.warning(
                        "Chain height below wallet sync height",
                        chain_height=current_height,
                        wallet_height=self.wallet.state.sync_height,
                    )
                    self.recommend_sync(SyncDepth.FROM_LAST_TRUSTED_BLOCK, reason='chain_rollback')
                    return False

                start_height = max(self.wallet.state.sync_height, self.wallet.config.creation_height)
                fetched = self._fetch_transactions(start_height)
                for transaction in fetched:
                    self.wallet.transactions[transaction.txid] = transaction
                self._update_wallet_state(current_height)
                logger.info("Synchronization completed", height=current_height)
                return True

            except Exception as e:
                logger.error(f"Synchronization failed: {e}")
                return False

    def sync_to_depth(self, depth: Optional[SyncDepth] = None) -> bool:
        """Rescan the chain from the height the given depth resolves to"""
        if depth is None:
            depth = self.wallet.config.sync_depth
        if not isinstance(depth, SyncDepth):
            raise TypeError(f"Expected SyncDepth, got {type(depth).__name__}")

        with self._sync_lock:
            try:
                blockchain = self._blockchain()
                from_height = self.resolve_start_height(depth)
                current_height = blockchain.get_block_height()
                self._set_block_height(current_height)
            except Exception as e:
                logger.error(f"Cannot start sync: {e}", depth=depth.name)
                return False

            logger.info("Starting blockchain rescan", depth=depth.name, from_height=from_height)
            self._emit(SyncEvent(SyncEventType.SYNC_STARTED, depth=depth, height=from_height))

            try:
                fetched = self._fetch_transactions(from_height)
            except Exception as e:
                logger.error(f"Blockchain rescan failed: {e}", depth=depth.name)
                self._emit(SyncEvent(SyncEventType.SYNC_STOPPED, depth=depth,
                                     height=self.wallet.state.sync_height, reason=str(e)))
                return False

            # History below the starting point is kept; everything above is replaced
            transactions = {
                txid: tx for txid, tx in self.wallet.transactions.items()
                if tx.block_height is not None and tx.block_height < from_height
            }
            for transaction in fetched:
                transactions[transaction.txid] = transaction
            self.wallet.transactions = transactions
            self._update_wallet_state(current_height)

            self._emit(SyncEvent(SyncEventType.SYNC_STOPPED, depth=depth,
                                 height=current_height, reason='complete'))
            return True

    def recommend_sync(self, depth: SyncDepth, reason: Optional[str] = None) -> None:
        """Tell listeners a resync at the given depth is advised"""
        logger.info("Sync recommended", depth=depth.name, reason=reason)
        self._emit(SyncEvent(SyncEventType.SYNC_RECOMMENDED, depth=depth,
                             height=self.current_block_height, reason=reason))

    def _set_block_height(self, height: int) -> None:
        if height != self.current_block_height:
            self.current_block_height = height
            self._emit(SyncEvent(SyncEventType.BLOCK_HEIGHT_UPDATED, height=height))

    def _fetch_transactions(self, from_height: int) -> List[Transaction]:
        """Wallet transactions at or above from_height; leaves wallet state untouched"""
        addresses = list(self.wallet.addresses)
        tx_data_list = self._blockchain().get_transactions_since(addresses, from_height)
        return [self._create_transaction_from_data(tx_data) for tx_data in tx_data_list]

    def _create_transaction_from_data(self, tx_data: Dict) -> Transaction:
        """Create Transaction object from blockchain data"""
        is_incoming = any(
            output.get('address') in self.wallet.addresses
            for output in tx_data.get('vout', [])
        )

        is_outgoing = any(
            input.get('address') in self.wallet.addresses
            for input in tx_data.get('vin', [])
        )

        direction = 'in' if is_incoming and not is_outgoing else 'out'

        amount = 0
        if direction == 'in':
            for output in tx_data.get('vout', []):
                if output.get('address') in self.wallet.addresses:
                    amount += output.get('value', 0)
        else:
            for input in tx_data.get('vin', []):
                if input.get('address') in self.wallet.addresses:
                    amount += input.get('value', 0)

        confirmations = tx_data.get('confirmations', 0)
        return Transaction(
            txid=tx_data['txid'],
            amount=amount,
            fee=tx_data.get('fee', 0),
            confirmations=confirmations,
            timestamp=tx_data.get('time', int(time.time())),
            block_height=tx_data.get('blockheight'),
            from_address=self._first_address(tx_data.get('vin', [])),
            to_address=self._first_address(tx_data.get('vout', [])),
            status='confirmed' if confirmations > 0 else 'pending',
            direction=direction,
        )

    @staticmethod
    def _first_address(entries: List[Dict]) -> str:
        for entry in entries:
            if 'address' in entry:
                return entry['address']
        return 'unknown'

    def _update_wallet_state(self, height: int):
        state = self.wallet.state
        state.sync_height = height
        state.last_updated = time.time()
        state.tx_count = len(self.wallet.transactions)
        state.total_received = sum(
            tx.amount for tx in self.wallet.transactions.values() if tx.direction == 'in'
        )
        state.total_sent = sum(
            tx.amount for tx in self.wallet.transactions.values() if tx.direction == 'out'
        )

    def get_sync_status(self) -> Dict:
        """Get synchronization status"""
        depth = self.wallet.config.sync_depth
        return {
            'running': self.running,
            'current_height': self.current_block_height,
            'wallet_height': self.wallet.state.sync_height,
            'last_sync': self.last_sync_time,
            'sync_depth': depth.name,
            'sync_depth_tag': depth.to_serialization(),
            'transactions_count': len(self.wallet.transactions),
            'sync_progress': self._calculate_sync_progress()
        }

    def _calculate_sync_progress(self) -> float:
        if self.current_block_height == 0:
            return 0.0

        progress = (self.wallet.state.sync_height / self.current_block_height) * 100
        return min(progress, 100.0)
