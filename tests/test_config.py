"""Tests for local configuration and device resolution."""

import json
from pathlib import Path

import pytest

from awtrixctl.exceptions import (
    ConfigFileInvalidError,
    ConfigValidationError,
    DeviceNotFoundError,
    NoDeviceError,
)
from awtrixctl.models import AppConfig
from awtrixctl.models.config import DEFAULT_CONFIG_PATH


@pytest.fixture
def config():
    """Config with two devices, 'living' as default."""
    config = AppConfig()
    config.add_device("living", "192.168.1.100", display_name="Living room")
    config.add_device("office", "192.168.1.101")
    return config


class TestResolveHost:
    """Test device resolution precedence."""

    @pytest.mark.unit
    def test_explicit_name(self, config):
        assert config.resolve_host("office", env={}) == "192.168.1.101"

    @pytest.mark.unit
    def test_explicit_literal_host(self, config):
        assert config.resolve_host("10.0.0.9", env={}) == "10.0.0.9"

    @pytest.mark.unit
    def test_explicit_beats_environment(self, config):
        env = {"AWTRIX_DEVICE": "10.0.0.1"}
        assert config.resolve_host("office", env=env) == "192.168.1.101"

    @pytest.mark.unit
    def test_environment_beats_default(self, config):
        assert config.resolve_host(None, env={"AWTRIX_DEVICE": "10.0.0.1"}) == "10.0.0.1"

    @pytest.mark.unit
    def test_default_device(self, config):
        assert config.resolve_host(None, env={}) == "192.168.1.100"

    @pytest.mark.unit
    def test_missing_default_names_it(self):
        config = AppConfig(default_device="ghost")
        with pytest.raises(DeviceNotFoundError) as exc_info:
            config.resolve_host(None, env={})
        assert exc_info.value.name == "ghost"
        assert "ghost" in exc_info.value.user_message

    @pytest.mark.unit
    def test_nothing_configured(self):
        with pytest.raises(NoDeviceError) as exc_info:
            AppConfig().resolve_host(None, env={})
        assert "AWTRIX_DEVICE" in exc_info.value.user_message

    @pytest.mark.unit
    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("AWTRIX_DEVICE", "awtrix.local")
        assert AppConfig().resolve_host() == "awtrix.local"


class TestDeviceRegistry:
    """Test adding and removing devices."""

    @pytest.mark.unit
    def test_first_device_becomes_default(self, config):
        assert config.default_device == "living"
        assert config.devices["living"].name == "Living room"
        assert config.devices["office"].name == "office"

    @pytest.mark.unit
    def test_set_default(self, config):
        config.add_device("kitchen", "192.168.1.102", set_default=True)
        assert config.default_device == "kitchen"

    @pytest.mark.unit
    def test_remove_default_clears_it(self, config):
        config.remove_device("living")
        assert "living" not in config.devices
        assert config.default_device is None

    @pytest.mark.unit
    def test_remove_unknown(self, config):
        with pytest.raises(DeviceNotFoundError):
            config.remove_device("garage")

    @pytest.mark.unit
    def test_timeout_for(self, config):
        assert config.timeout_for("office", env={}) == 30
        assert config.timeout_for(None, env={}) == 30
        assert config.timeout_for("10.0.0.9", env={}) is None

    @pytest.mark.unit
    def test_timeout_for_environment_host(self, config):
        """A host from AWTRIX_DEVICE does not borrow the default device's timeout."""
        config.devices["living"].timeout = 5
        env = {"AWTRIX_DEVICE": "10.0.0.1"}
        assert config.timeout_for(None, env=env) is None
        assert config.timeout_for("living", env=env) == 5


class TestConfigPersistence:
    """Test loading and saving the config file."""

    @pytest.mark.unit
    def test_default_path(self):
        assert AppConfig.default_path(env={}) == DEFAULT_CONFIG_PATH
        assert AppConfig.default_path(env={"AWTRIX_CONFIG": "/tmp/a.json"}) == Path("/tmp/a.json")

    @pytest.mark.unit
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "config.json"
        config = AppConfig.load_or_default(path)
        assert config.devices == {}
        assert config.default_device is None
        assert not path.exists()

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path, config):
        path = tmp_path / "nested" / "config.json"
        config.save(path)
        loaded = AppConfig.load_or_default(path)
        assert loaded == config

    @pytest.mark.unit
    def test_uses_awtrix_config_env(self, config_path: Path, config):
        config.save()
        assert config_path.exists()
        assert AppConfig.load_or_default().default_device == "living"

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"devices": {},}', encoding="utf-8")
        with pytest.raises(ConfigFileInvalidError) as exc_info:
            AppConfig.load_or_default(path)
        assert str(path) in exc_info.value.user_message

    @pytest.mark.unit
    def test_invalid_values(self, tmp_path: Path):
        path = tmp_path / "config.json"
        data = {"devices": {"living": {"host": "1.2.3.4", "name": "x", "timeout": 0}}}
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)
        assert exc_info.value.field == "devices.living.timeout"
