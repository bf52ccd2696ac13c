"""Unit tests for XDG path helpers."""

import pytest

from visionfi_cli.lib.paths import (
    ensure_config_dir,
    expand_user_path,
    get_config_dir,
    get_config_file,
    get_default_key_path,
)


@pytest.mark.unit
class TestPaths:
    def test_config_dir_uses_xdg(self, isolated_config_home):
        assert get_config_dir() == isolated_config_home / "visionfi"

    def test_config_dir_defaults_to_home(self, monkeypatch, tmp_path):
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / ".config" / "visionfi"

    def test_config_file(self, isolated_config_home):
        assert get_config_file() == isolated_config_home / "visionfi" / "config.yaml"

    def test_default_key_path(self, isolated_config_home):
        expected = isolated_config_home / "visionfi" / "keys" / "visionfi_service_account.json"
        assert get_default_key_path() == expected

    def test_ensure_config_dir_creates_key_dir(self, isolated_config_home):
        config_dir = ensure_config_dir()
        assert (config_dir / "keys").is_dir()

    def test_expand_user_path(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert expand_user_path("  ~/keys/sa.json ") == tmp_path / "keys" / "sa.json"
