"""Unit tests for ConfigLoader."""

import logging

import pytest
import yaml

from visionfi_cli.config.loader import DEFAULT_API_ENDPOINT, ConfigLoader
from visionfi_cli.exceptions import ConfigError


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "visionfi" / "config.yaml"


class TestLoad:
    def test_missing_file_gives_defaults(self, config_file):
        config = ConfigLoader(config_file).load()

        assert config["api_endpoint"] == DEFAULT_API_ENDPOINT
        assert config["workflow_cache_ttl"] == 1200
        assert config["recent_uuids"] == []
        assert config["debug_mode"] is False

    def test_default_location_follows_xdg(self, isolated_config_home):
        assert ConfigLoader().config_path == isolated_config_home / "visionfi" / "config.yaml"

    def test_file_values_override_defaults(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("api_endpoint: https://example.test/api\nworkflow_cache_ttl: '60'\n")

        config = ConfigLoader(config_file).load()

        assert config["api_endpoint"] == "https://example.test/api"
        assert config["workflow_cache_ttl"] == 60
        assert config["test_mode"] is False

    def test_env_overrides_file(self, config_file, monkeypatch):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("api_endpoint: https://file.test/api\n")
        monkeypatch.setenv("VISIONFI_API_ENDPOINT", "https://env.test/api")
        monkeypatch.setenv("VISIONFI_WORKFLOW_CACHE_TTL", "30")

        config = ConfigLoader(config_file).load()

        assert config["api_endpoint"] == "https://env.test/api"
        assert config["workflow_cache_ttl"] == 30

    def test_corrupt_file_falls_back_to_defaults(self, config_file, caplog):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("api_endpoint: [unterminated\n")

        with caplog.at_level(logging.WARNING, logger="visionfi_cli.config.loader"):
            config = ConfigLoader(config_file).load()

        assert config["api_endpoint"] == DEFAULT_API_ENDPOINT
        assert "Invalid YAML" in caplog.text

    def test_invalid_ttl_uses_default(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("workflow_cache_ttl: soon\n")

        assert ConfigLoader(config_file).load()["workflow_cache_ttl"] == 1200

    def test_recent_uuids_sanitized(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("recent_uuids: notalist\n")

        assert ConfigLoader(config_file).load()["recent_uuids"] == []


class TestSave:
    def test_save_then_load(self, config_file):
        loader = ConfigLoader(config_file)
        config = loader.load()
        config["recent_uuids"] = ["job-1"]
        config["workflow_cache_ttl"] = 600

        loader.save(config)

        assert yaml.safe_load(config_file.read_text())["recent_uuids"] == ["job-1"]
        assert loader.load()["workflow_cache_ttl"] == 600

    def test_unwritable_location(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        loader = ConfigLoader(blocker / "config.yaml")

        with pytest.raises(ConfigError):
            loader.save({"api_endpoint": "x"})

    def test_env_override_is_not_persisted(self, config_file, monkeypatch):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("api_endpoint: https://prod.test/api\n")
        monkeypatch.setenv("VISIONFI_API_ENDPOINT", "https://staging.test/api")
        monkeypatch.setenv("VISIONFI_WORKFLOW_CACHE_TTL", "30")
        loader = ConfigLoader(config_file)
        config = loader.load()
        config["recent_uuids"] = ["job-1"]

        loader.save(config)

        saved = yaml.safe_load(config_file.read_text())
        assert saved["api_endpoint"] == "https://prod.test/api"
        assert saved["workflow_cache_ttl"] == 1200
        assert saved["recent_uuids"] == ["job-1"]
        assert config["api_endpoint"] == "https://staging.test/api"

    def test_explicit_change_overrides_env_value(self, config_file, monkeypatch):
        monkeypatch.setenv("VISIONFI_API_ENDPOINT", "https://staging.test/api")
        loader = ConfigLoader(config_file)
        config = loader.load()
        config["api_endpoint"] = "https://new.test/api"

        loader.save(config)

        assert yaml.safe_load(config_file.read_text())["api_endpoint"] == "https://new.test/api"
