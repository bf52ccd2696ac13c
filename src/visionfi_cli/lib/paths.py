"""XDG-compliant path management for the visionfi CLI."""

import os
from pathlib import Path

SERVICE_ACCOUNT_KEY_NAME = "visionfi_service_account.json"


def get_config_dir() -> Path:
    """
    Get the configuration directory following XDG Base Directory spec.

    Returns
    -------
    Path
        Path to ~/.config/visionfi/ or $XDG_CONFIG_HOME/visionfi/.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"

    return base / "visionfi"


def get_key_dir() -> Path:
    """
    Get the directory holding the default service account key.

    Returns
    -------
    Path
        Path to keys/ in the configuration directory.
    """
    return get_config_dir() / "keys"


def get_default_key_path() -> Path:
    """
    Get path to the default service account key file.

    Returns
    -------
    Path
        Path to keys/visionfi_service_account.json in the configuration directory.
    """
    return get_key_dir() / SERVICE_ACCOUNT_KEY_NAME


def get_config_file() -> Path:
    """
    Get path to main configuration file.

    Returns
    -------
    Path
        Path to config.yaml in the configuration directory.
    """
    return get_config_dir() / "config.yaml"


def ensure_config_dir() -> Path:
    """
    Ensure configuration directory exists and return it.

    Creates the config directory and its keys/ subdirectory if they
    don't exist.

    Returns
    -------
    Path
        Path to config directory.
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    get_key_dir().mkdir(exist_ok=True)
    return config_dir


def expand_user_path(path: str) -> Path:
    """
    Normalize a user-entered path.

    Strips surrounding whitespace and expands a leading ``~``.

    Parameters
    ----------
    path : str
        Path as typed by the user.

    Returns
    -------
    Path
        Expanded path.
    """
    return Path(path.strip()).expanduser()
