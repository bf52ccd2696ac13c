"""Account and configuration operations used by the config command and interactive mode."""

import shutil
from pathlib import Path
from typing import Any

from visionfi_cli.api.capabilities import ClientInfoProvider
from visionfi_cli.config.loader import DEFAULT_CONFIG
from visionfi_cli.core.results import CommandResult
from visionfi_cli.core.session import Session
from visionfi_cli.exceptions import ValidationError
from visionfi_cli.lib.formatters import format_cache_ttl, parse_cache_ttl
from visionfi_cli.lib.paths import expand_user_path, get_default_key_path

SETTABLE_KEYS = ("service_account_path", "api_endpoint", "debug_mode", "test_mode", "workflow_cache_ttl")


def get_client_info(client: ClientInfoProvider | None) -> CommandResult:
    """
    Retrieve account information for the authenticated client.

    Parameters
    ----------
    client : ClientInfoProvider or None
        API client.

    Returns
    -------
    CommandResult
        Payload is the ``data`` field of the response.
    """
    if client is None:
        return CommandResult.fail("Client not initialized")

    try:
        response = client.get_client_info()
    except Exception as e:
        return CommandResult.fail(f"Error retrieving client information: {e}", error=e)

    if response and response.get("success") and response.get("data"):
        return CommandResult.ok("Client information retrieved successfully", response["data"])
    return CommandResult.fail("Failed to retrieve client information", payload=response)


def update_config(session: Session, key: str, value: Any) -> CommandResult:
    """
    Set one configuration key and persist it.

    Parameters
    ----------
    session : Session
        Current session.
    key : str
        Configuration key.
    value : Any
        New value.

    Returns
    -------
    CommandResult
        Payload ``{"key": ..., "value": ...}``.
    """
    previous = session.config.get(key)
    session.config[key] = value
    try:
        session.save()
    except Exception as e:
        session.config[key] = previous
        return CommandResult.fail(f"Failed to update configuration: {e}", error=e)
    return CommandResult.ok(f"Configuration updated: {key}", {"key": key, "value": value})


def coerce_config_value(key: str, raw: str) -> Any:
    """
    Convert a command-line string to the type stored for ``key``.

    Raises
    ------
    ValidationError
        If the key is unknown or the value does not fit its type.
    """
    if key not in SETTABLE_KEYS:
        raise ValidationError(f"Unknown configuration key: {key}", {"allowed": ", ".join(SETTABLE_KEYS)})

    if key == "workflow_cache_ttl":
        return parse_cache_ttl(raw)

    if isinstance(DEFAULT_CONFIG[key], bool):
        lowered = raw.strip().lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
        raise ValidationError(f"Invalid boolean for {key}: {raw}")

    if key == "service_account_path":
        return str(expand_user_path(raw))

    return raw.strip()


def set_config_value(session: Session, key: str, raw: str) -> CommandResult:
    """Validate and store a configuration value given as text."""
    try:
        value = coerce_config_value(key, raw)
    except ValidationError as e:
        return CommandResult.fail(e.message, error=e)

    if key == "workflow_cache_ttl":
        return set_cache_ttl(session, raw)

    result = update_config(session, key, value)
    if result.success and key == "api_endpoint" and session.client is not None:
        session.initialize_client()
    return result


def set_cache_ttl(session: Session, ttl: str) -> CommandResult:
    """
    Parse a TTL string and apply it to the cache and the configuration.

    Parameters
    ----------
    session : Session
        Current session.
    ttl : str
        TTL text such as "30s", "10m" or "2h".

    Returns
    -------
    CommandResult
        Payload ``{"seconds": ..., "formatted": ...}``.
    """
    try:
        seconds = parse_cache_ttl(ttl)
    except ValidationError as e:
        return CommandResult.fail(e.message, error=e)

    result = update_config(session, "workflow_cache_ttl", seconds)
    if not result.success:
        return result

    session.workflow_cache.ttl_seconds = seconds
    formatted = format_cache_ttl(seconds)
    return CommandResult.ok(
        f"Workflow cache time set to {formatted}.", {"seconds": seconds, "formatted": formatted}
    )


def clear_recent_jobs(session: Session) -> CommandResult:
    result = update_config(session, "recent_uuids", [])
    if result.success:
        return CommandResult.ok("Recent UUIDs cleared.")
    return result


def clear_workflow_cache(session: Session) -> CommandResult:
    session.workflow_cache.clear()
    return CommandResult.ok("Workflow cache cleared.")


def set_service_account(session: Session, service_account_path: str) -> CommandResult:
    """
    Point the configuration at a service account key and build a client.

    Parameters
    ----------
    session : Session
        Current session.
    service_account_path : str
        Path as typed by the user; ``~`` is expanded.

    Returns
    -------
    CommandResult
        Failure if the path is empty, missing or the key is unusable.
    """
    if not service_account_path or not service_account_path.strip():
        return CommandResult.fail("Service account path is empty")

    path = expand_user_path(service_account_path)
    if not path.exists():
        return CommandResult.fail(f"File not found: {path}")

    init_result = session.initialize_client(str(path))
    if not init_result.success:
        return init_result

    result = update_config(session, "service_account_path", str(path))
    if not result.success:
        return result
    return CommandResult.ok("Service account configured successfully", {"path": str(path)})


def setup_default_service_account(
    session: Session, source_path: str, default_key_path: Path | None = None
) -> CommandResult:
    """
    Copy a service account key to the default location and use it.

    Parameters
    ----------
    session : Session
        Current session.
    source_path : str
        Key to copy; ``~`` is expanded.
    default_key_path : Path, optional
        Destination, by default ``<config dir>/keys/visionfi_service_account.json``.

    Returns
    -------
    CommandResult
        Payload ``{"path": destination}`` on success.
    """
    if not source_path or not source_path.strip():
        return CommandResult.fail("Source path is empty")

    source = expand_user_path(source_path)
    if not source.exists():
        return CommandResult.fail(f"File not found: {source}")

    destination = default_key_path or get_default_key_path()
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
    except OSError as e:
        return CommandResult.fail(f"Failed to setup default service account: {e}", error=e)

    init_result = session.initialize_client(str(destination))
    if not init_result.success:
        return init_result

    result = update_config(session, "service_account_path", str(destination))
    if not result.success:
        return result
    return CommandResult.ok("Service account copied and configured successfully", {"path": str(destination)})
