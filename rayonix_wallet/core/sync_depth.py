#rayonix_wallet/core/sync_depth.py
from enum import Enum
from typing import Optional

from rayonix_wallet.core.exceptions import UnrecognizedSyncDepthError


class SyncDepth(Enum):
    """Starting point for a wallet resynchronization.

    Each member's value is its wire tag. The tags are persisted and must
    never be reassigned to a different member.
    """

    # Sync from the block height of the last confirmed send transaction
    FROM_LAST_CONFIRMED_SEND = 0xA0

    # Sync from the last trusted block; trust depends on the chain and mode
    FROM_LAST_TRUSTED_BLOCK = 0xB0

    # Sync from the block height at which the account was created
    FROM_CREATION = 0xC0

    def to_serialization(self) -> int:
        """Wire tag for this depth"""
        return self.value

    @classmethod
    def from_serialization(cls, tag: int) -> Optional['SyncDepth']:
        """Depth for a wire tag, or None if the tag is not recognised"""
        try:
            return cls(tag)
        except ValueError:
            return None

    @classmethod
    def parse(cls, tag: int) -> 'SyncDepth':
        """Like from_serialization, but raises on an unknown tag"""
        depth = cls.from_serialization(tag)
        if depth is None:
            raise UnrecognizedSyncDepthError(tag)
        return depth

    @classmethod
    def from_name(cls, name: str) -> Optional['SyncDepth']:
        """Depth for a configuration name such as 'from_creation'"""
        if not isinstance(name, str):
            return None
        return cls.__members__.get(name.strip().upper().replace('-', '_'))


def encode_sync_depth(depth: SyncDepth) -> int:
    if not isinstance(depth, SyncDepth):
        raise TypeError(f"Expected SyncDepth, got {type(depth).__name__}")
    return depth.value


def decode_sync_depth(tag: int) -> Optional[SyncDepth]:
    return SyncDepth.from_serialization(tag)
