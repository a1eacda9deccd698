"""
Sync depth persistence

Tests for:
- Single-byte wire framing
- MessagePack wallet config storage
"""

import msgpack
import pytest

from rayonix_wallet.core.config import WalletConfig
from rayonix_wallet.core.exceptions import SerializationError, UnrecognizedSyncDepthError
from rayonix_wallet.core.sync_depth import SyncDepth
from rayonix_wallet.storage.serialization import (
    WalletConfigSerializer,
    pack_sync_depth,
    unpack_sync_depth,
)


class TestSyncDepthByte:
    """A sync depth travels as exactly one byte."""

    def test_pack_bytes(self):
        assert pack_sync_depth(SyncDepth.FROM_LAST_CONFIRMED_SEND) == b'\xa0'
        assert pack_sync_depth(SyncDepth.FROM_LAST_TRUSTED_BLOCK) == b'\xb0'
        assert pack_sync_depth(SyncDepth.FROM_CREATION) == b'\xc0'

    def test_unpack_known_byte(self):
        assert unpack_sync_depth(b'\xc0') is SyncDepth.FROM_CREATION

    def test_unpack_unknown_byte(self):
        with pytest.raises(UnrecognizedSyncDepthError) as exc_info:
            unpack_sync_depth(b'\xff')
        assert exc_info.value.tag == 0xFF

    @pytest.mark.parametrize("data", [b'', b'\xa0\xa0'])
    def test_unpack_wrong_length(self, data):
        with pytest.raises(SerializationError):
            unpack_sync_depth(data)

    def test_pack_rejects_raw_int(self):
        with pytest.raises(TypeError):
            pack_sync_depth(0xA0)


class TestWalletConfigSerializer:
    """Stored configs carry the sync depth tag."""

    def test_stored_depth_is_tag(self):
        serializer = WalletConfigSerializer()
        data = serializer.serialize(WalletConfig(sync_depth=SyncDepth.FROM_CREATION))

        assert msgpack.unpackb(data, raw=False)['sync_depth'] == 0xC0

    def test_round_trip(self):
        serializer = WalletConfigSerializer()
        config = WalletConfig(network='testnet', sync_depth=SyncDepth.FROM_LAST_CONFIRMED_SEND,
                              trusted_block_height=9000, creation_height=100)

        assert serializer.deserialize(serializer.serialize(config)) == config

    def test_unknown_stored_tag_raises(self):
        serializer = WalletConfigSerializer()
        data = msgpack.packb({'network': 'mainnet', 'sync_depth': 0xD0}, use_bin_type=True)

        with pytest.raises(UnrecognizedSyncDepthError):
            serializer.deserialize(data)

    def test_stored_name_is_rejected(self):
        serializer = WalletConfigSerializer()
        data = msgpack.packb({'sync_depth': 'FROM_CREATION'}, use_bin_type=True)

        with pytest.raises(SerializationError):
            serializer.deserialize(data)

    def test_missing_depth_uses_default(self):
        serializer = WalletConfigSerializer()
        data = msgpack.packb({'network': 'testnet'}, use_bin_type=True)

        assert serializer.deserialize(data).sync_depth is WalletConfig().sync_depth

    @pytest.mark.parametrize("data", [b'', b'\xc1', msgpack.packb([1, 2, 3])])
    def test_malformed_data_raises(self, data):
        with pytest.raises(SerializationError):
            WalletConfigSerializer().deserialize(data)
