"""Client construction and authentication checks."""

import logging
from typing import Any

from visionfi_cli.api.capabilities import AuthVerifier, ClientFactory
from visionfi_cli.core.results import CommandResult

logger = logging.getLogger(__name__)

NO_SERVICE_ACCOUNT_MESSAGE = (
    "No service account configured. Run in interactive mode to set up a service account."
)
CLIENT_NOT_INITIALIZED_MESSAGE = "Client not initialized. Please configure a service account first."


def initialize_client(
    service_account_path: str, config: dict, client_factory: ClientFactory
) -> CommandResult:
    """
    Build an API client for a service account key.

    Parameters
    ----------
    service_account_path : str
        Path to the service account JSON key.
    config : dict
        Configuration providing ``api_endpoint``.
    client_factory : ClientFactory
        Callable building the client.

    Returns
    -------
    CommandResult
        Payload ``{"client": client}`` on success.
    """
    try:
        client = client_factory(str(service_account_path), config["api_endpoint"])
    except Exception as e:
        return CommandResult.fail(f"Failed to initialize client: {e}", error=e)
    return CommandResult.ok("Client initialized successfully", {"client": client})


def verify_authentication(client: AuthVerifier | None) -> CommandResult:
    """
    Ask the API whether the client's credentials are accepted.

    Parameters
    ----------
    client : AuthVerifier or None
        Client to check.

    Returns
    -------
    CommandResult
        Success when ``verify_auth()`` reports truthy ``data``.
    """
    if client is None:
        return CommandResult.fail(CLIENT_NOT_INITIALIZED_MESSAGE)

    try:
        auth_result = client.verify_auth()
    except Exception as e:
        logger.debug("verify_auth raised: %s", e)
        return CommandResult.fail(f"Authentication error: {e}", error=e)

    data = (auth_result or {}).get("data")
    if data:
        return CommandResult.ok("Authentication successful!", data)
    return CommandResult.fail("Authentication failed!", payload=data)


def authenticate(config: dict, client_factory: ClientFactory) -> CommandResult:
    """
    Verify authentication with the configured service account.

    Parameters
    ----------
    config : dict
        Loaded configuration.
    client_factory : ClientFactory
        Callable building the client.

    Returns
    -------
    CommandResult
        Result of the ``auth verify`` check.
    """
    if not config.get("service_account_path"):
        return CommandResult.fail(CLIENT_NOT_INITIALIZED_MESSAGE)

    init_result = initialize_client(config["service_account_path"], config, client_factory)
    if not init_result.success:
        return init_result

    return verify_authentication(init_result.payload["client"])


def connect(config: dict, client_factory: ClientFactory) -> tuple[Any, CommandResult | None]:
    """
    Build a client and verify it before running an authenticated operation.

    Parameters
    ----------
    config : dict
        Loaded configuration.
    client_factory : ClientFactory
        Callable building the client.

    Returns
    -------
    tuple
        ``(client, None)`` when authenticated, ``(None, failure)`` otherwise.
    """
    if not config.get("service_account_path"):
        return None, CommandResult.fail(NO_SERVICE_ACCOUNT_MESSAGE)

    init_result = initialize_client(config["service_account_path"], config, client_factory)
    if not init_result.success:
        return None, init_result

    client = init_result.payload["client"]
    try:
        auth_result = client.verify_auth()
    except Exception as e:
        return None, CommandResult.fail(f"Authentication error: {e}", error=e)

    if not (auth_result or {}).get("data"):
        return None, CommandResult.fail("Authentication failed.")

    return client, None
