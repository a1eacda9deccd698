"""
Wallet configuration

Tests for:
- Sync depth coercion from names and tags
- Loading YAML and JSON config files
- Fallback on unrecognized sync depth
"""

import json
import logging

import pytest
import yaml

from rayonix_wallet.core.config import DEFAULT_SYNC_DEPTH, WalletConfig, load_wallet_config
from rayonix_wallet.core.exceptions import ConfigError
from rayonix_wallet.core.sync_depth import SyncDepth


class TestWalletConfig:
    """Config dataclass keeps the sync depth as an enum."""

    def test_defaults(self):
        config = WalletConfig()

        assert config.sync_depth is SyncDepth.FROM_LAST_TRUSTED_BLOCK
        assert config.sync_interval == 300
        assert config.creation_height == 0

    def test_coerces_name(self):
        config = WalletConfig(sync_depth="from_creation")
        assert config.sync_depth is SyncDepth.FROM_CREATION

    def test_coerces_wire_tag(self):
        config = WalletConfig(sync_depth=0xA0)
        assert config.sync_depth is SyncDepth.FROM_LAST_CONFIRMED_SEND

    @pytest.mark.parametrize("value", ["sometimes", 0x00, True, None, 1.5])
    def test_rejects_unknown_depth(self, value):
        with pytest.raises(ConfigError):
            WalletConfig(sync_depth=value)

    def test_rejects_bad_interval(self):
        with pytest.raises(ConfigError):
            WalletConfig(sync_interval=0)

    def test_rejects_negative_heights(self):
        with pytest.raises(ConfigError):
            WalletConfig(creation_height=-1)

    def test_to_dict_uses_wire_tag(self):
        data = WalletConfig(sync_depth=SyncDepth.FROM_CREATION).to_dict()
        assert data['sync_depth'] == 0xC0

    def test_from_dict_ignores_unknown_keys(self):
        config = WalletConfig.from_dict({'network': 'testnet', 'colour': 'blue'})
        assert config.network == 'testnet'

    def test_dict_round_trip(self):
        config = WalletConfig(network='testnet', sync_depth=SyncDepth.FROM_CREATION,
                              creation_height=1200)
        assert WalletConfig.from_dict(config.to_dict()) == config


class TestLoadWalletConfig:
    """Config files are read by suffix."""

    def test_no_path_gives_defaults(self):
        assert load_wallet_config() == WalletConfig()

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_wallet_config(tmp_path / "absent.yaml") == WalletConfig()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "wallet.yaml"
        path.write_text(yaml.safe_dump({
            'wallet': {
                'network': 'testnet',
                'sync_depth': 'from_last_confirmed_send',
                'creation_height': 500,
            }
        }))

        config = load_wallet_config(path)

        assert config.network == 'testnet'
        assert config.sync_depth is SyncDepth.FROM_LAST_CONFIRMED_SEND
        assert config.creation_height == 500

    def test_json_file_with_tag(self, tmp_path):
        path = tmp_path / "wallet.json"
        path.write_text(json.dumps({'sync_depth': 0xC0}))

        config = load_wallet_config(path)

        assert config.sync_depth is SyncDepth.FROM_CREATION

    def test_unknown_depth_falls_back(self, tmp_path, caplog):
        path = tmp_path / "wallet.yaml"
        path.write_text("sync_depth: from_yesterday\n")

        with caplog.at_level(logging.WARNING, logger="rayonix_wallet.core.config"):
            config = load_wallet_config(path)

        assert config.sync_depth is DEFAULT_SYNC_DEPTH
        assert "from_yesterday" in caplog.text

    def test_unknown_tag_falls_back(self, tmp_path):
        path = tmp_path / "wallet.json"
        path.write_text(json.dumps({'sync_depth': 0xD0}))

        assert load_wallet_config(path).sync_depth is DEFAULT_SYNC_DEPTH

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "wallet.yaml"
        path.write_text("")

        assert load_wallet_config(path) == WalletConfig()

    def test_malformed_yaml_raises(self, tmp_path):
        path = tmp_path / "wallet.yaml"
        path.write_text("sync_depth: [unclosed\n")

        with pytest.raises(ConfigError):
            load_wallet_config(path)

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "wallet.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ConfigError):
            load_wallet_config(path)
