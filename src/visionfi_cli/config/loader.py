"""Configuration loader with defaults and environment overrides."""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from visionfi_cli.exceptions import ConfigError
from visionfi_cli.lib.paths import get_config_file

logger = logging.getLogger(__name__)

DEFAULT_API_ENDPOINT = "https://platform.visionfi.ai/api/v1"

DEFAULT_CONFIG: dict[str, Any] = {
    "service_account_path": "",
    "api_endpoint": DEFAULT_API_ENDPOINT,
    "recent_uuids": [],
    "debug_mode": False,
    "test_mode": False,
    "workflow_cache_ttl": 1200,  # 20 minutes
}

# Environment variable -> config key
ENV_OVERRIDES = {
    "VISIONFI_SERVICE_ACCOUNT_PATH": "service_account_path",
    "VISIONFI_API_ENDPOINT": "api_endpoint",
    "VISIONFI_WORKFLOW_CACHE_TTL": "workflow_cache_ttl",
}


def default_config() -> dict[str, Any]:
    """Return a fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


class ConfigLoader:
    """
    Load and save the CLI configuration file.

    The configuration is a flat YAML mapping stored at
    ``$XDG_CONFIG_HOME/visionfi/config.yaml``. Keys missing from the file are
    filled from DEFAULT_CONFIG, and VISIONFI_* environment variables override
    file values.

    Attributes
    ----------
    config_path : Path
        Path to configuration file.
    """

    def __init__(self, config_path: Path | None = None):
        """
        Initialize configuration loader.

        Parameters
        ----------
        config_path : Path or None, optional
            Path to config file. If None, uses default config.yaml location,
            by default None.
        """
        self.config_path = Path(config_path) if config_path else get_config_file()
        # config key -> (file or default value, env value) from the last load
        self._env_values: dict[str, tuple[Any, Any]] = {}

    def _load_yaml_file(self, path: Path) -> dict:
        """
        Load and parse a YAML configuration file.

        A file that cannot be parsed is reported and ignored so the CLI can
        still start with defaults.

        Parameters
        ----------
        path : Path
            Path to YAML file to load.

        Returns
        -------
        dict
            Parsed YAML content, or empty dict if file doesn't exist or is invalid.
        """
        if not path.exists():
            return {}

        try:
            with open(path) as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning("Invalid YAML in %s, using defaults: %s", path, e)
            return {}

        if not isinstance(content, dict):
            if content is not None:
                logger.warning("Config file %s is not a mapping, using defaults", path)
            return {}
        return content

    def _apply_env_overrides(self, config: dict) -> dict:
        """
        Apply VISIONFI_* environment variable overrides.

        Parameters
        ----------
        config : dict
            Configuration dictionary to apply overrides to.

        Returns
        -------
        dict
            Configuration with environment variable overrides applied.
        """
        for env_key, config_key in ENV_OVERRIDES.items():
            value = os.environ.get(env_key)
            if value:
                logger.debug("Using %s from %s", config_key, env_key)
                config[config_key] = value
        return config

    def _coerce_types(self, config: dict) -> dict:
        try:
            config["workflow_cache_ttl"] = int(config["workflow_cache_ttl"])
        except (TypeError, ValueError):
            logger.warning(
                "Invalid workflow_cache_ttl %r, using default %s",
                config["workflow_cache_ttl"],
                DEFAULT_CONFIG["workflow_cache_ttl"],
            )
            config["workflow_cache_ttl"] = DEFAULT_CONFIG["workflow_cache_ttl"]

        if not isinstance(config.get("recent_uuids"), list):
            config["recent_uuids"] = []
        else:
            config["recent_uuids"] = [str(u) for u in config["recent_uuids"] if u]

        return config

    def load(self) -> dict:
        """
        Load configuration merged with defaults.

        Merge order (lowest to highest priority):
        1. Defaults (DEFAULT_CONFIG)
        2. Config file (config.yaml)
        3. Environment variables (VISIONFI_*)

        Returns
        -------
        dict
            Configuration dictionary.
        """
        stored = default_config()
        stored.update(self._load_yaml_file(self.config_path))
        stored = self._coerce_types(stored)

        config = self._coerce_types(self._apply_env_overrides(copy.deepcopy(stored)))
        self._env_values = {
            key: (stored[key], config[key]) for key in ENV_OVERRIDES.values() if config[key] != stored[key]
        }
        return config

    def _without_env_values(self, config: dict) -> dict:
        data = dict(config)
        for key, (stored_value, env_value) in self._env_values.items():
            if data.get(key) == env_value:
                data[key] = stored_value
        return data

    def save(self, config: dict) -> None:
        """
        Write configuration to the config file.

        Keys whose value still comes from a VISIONFI_* environment variable
        are written with the value they had before the override, so a one-off
        environment setting never ends up in config.yaml.

        Parameters
        ----------
        config : dict
            Configuration dictionary to persist.

        Raises
        ------
        ConfigError
            If the file cannot be written.
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                yaml.safe_dump(self._without_env_values(config), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}", {"path": str(self.config_path)})

        logger.debug("Saved configuration to %s", self.config_path)
