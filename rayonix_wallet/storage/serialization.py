# rayonix_wallet/storage/serialization.py

import logging
import struct
from typing import Any

import msgpack

from rayonix_wallet.core.config import WalletConfig
from rayonix_wallet.core.exceptions import ConfigError, SerializationError
from rayonix_wallet.core.sync_depth import SyncDepth, encode_sync_depth

logger = logging.getLogger(__name__)

SYNC_DEPTH_FORMAT = struct.Struct('B')

def pack_sync_depth(depth: SyncDepth) -> bytes:
    """Encode a sync depth as its single wire byte"""
    return SYNC_DEPTH_FORMAT.pack(encode_sync_depth(depth))

def unpack_sync_depth(data: bytes) -> SyncDepth:
    """Decode a single wire byte; raises UnrecognizedSyncDepthError on unknown tags"""
    if len(data) != SYNC_DEPTH_FORMAT.size:
        raise SerializationError(
            f"Sync depth must be {SYNC_DEPTH_FORMAT.size} byte, got {len(data)}"
        )
    (tag,) = SYNC_DEPTH_FORMAT.unpack(data)
    return SyncDepth.parse(tag)

class WalletConfigSerializer:
    """MessagePack persistence for WalletConfig"""

    def __init__(self, use_bin_type: bool = True):
        self.use_bin_type = use_bin_type

    def serialize(self, config: WalletConfig) -> bytes:
        try:
            return msgpack.packb(config.to_dict(), use_bin_type=self.use_bin_type)
        except (msgpack.PackException, TypeError, ValueError) as e:
            logger.error(f"Wallet config serialization failed: {e}")
            raise SerializationError(f"MessagePack serialization failed: {e}") from e

    def deserialize(self, data: bytes) -> WalletConfig:
        """Rebuild a WalletConfig; an unknown stored sync depth tag is not replaced"""
        if not data:
            raise SerializationError("No wallet config data")

        try:
            unpacked = msgpack.unpackb(data, raw=False, strict_map_key=False)
        except (msgpack.UnpackException, ValueError) as e:
            logger.error(f"Wallet config deserialization failed: {e}")
            raise SerializationError(f"MessagePack deserialization failed: {e}") from e

        if not isinstance(unpacked, dict):
            raise SerializationError(f"Expected a map, got {type(unpacked).__name__}")

        if 'sync_depth' in unpacked:
            unpacked['sync_depth'] = self._decode_sync_depth(unpacked['sync_depth'])

        try:
            return WalletConfig.from_dict(unpacked)
        except (ConfigError, TypeError) as e:
            raise SerializationError(f"Invalid stored wallet config: {e}") from e

    @staticmethod
    def _decode_sync_depth(value: Any) -> SyncDepth:
        if not isinstance(value, int) or isinstance(value, bool):
            raise SerializationError(f"Stored sync depth must be an integer tag, got {value!r}")
        return SyncDepth.parse(value)
