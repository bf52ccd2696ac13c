"""
Command Helper Functions.

This module provides common helper functions used across visionfi commands to
reduce code duplication and ensure consistent behavior.

Functions
---------
require_config : Get configuration with validation
get_client_factory : Get the API client factory from the context
get_config_manager : Get the config store from the context
create_session : Build a Session from the context
report_result : Print a CommandResult and return its exit code
"""

import json
import sys
import traceback
from typing import Any, TypedDict

from visionfi_cli.api.client import create_client
from visionfi_cli.config.loader import ConfigLoader
from visionfi_cli.core.results import CommandResult
from visionfi_cli.core.session import Session
from visionfi_cli.exceptions import ConfigError
from visionfi_cli.lib.output import error, info, print_json, success


class CommandContext(TypedDict, total=False):
    """
    Type-safe command context dictionary.

    Attributes
    ----------
    config : dict
        Loaded configuration dictionary.
    config_manager : ConfigLoader
        Store the configuration was loaded from.
    client_factory : callable
        Builds API clients; replaced by fakes in tests.
    verbose : bool
        Enable verbose output.
    json_output : bool
        Print results as JSON.
    args : argparse.Namespace
        Parsed command-line arguments.
    """

    config: dict
    config_manager: Any
    client_factory: Any
    verbose: bool
    json_output: bool
    args: object  # argparse.Namespace


def require_config(ctx: CommandContext) -> dict:
    """
    Ensure configuration is loaded and return it.

    Parameters
    ----------
    ctx : CommandContext
        Command context dictionary.

    Returns
    -------
    dict
        Configuration dictionary.

    Raises
    ------
    ConfigError
        If configuration is not loaded.
    """
    config = ctx.get("config")
    if config is None:
        raise ConfigError("Configuration not loaded")
    return config


def get_client_factory(ctx: CommandContext):
    return ctx.get("client_factory") or create_client


def get_config_manager(ctx: CommandContext):
    return ctx.get("config_manager") or ConfigLoader()


def create_session(ctx: CommandContext) -> Session:
    """Build a Session from the command context."""
    return Session(require_config(ctx), get_config_manager(ctx), get_client_factory(ctx))


def report_result(ctx: CommandContext, result: CommandResult, show_payload: bool = False) -> int:
    """
    Print a CommandResult and return its exit code.

    Parameters
    ----------
    ctx : CommandContext
        Command context dictionary.
    result : CommandResult
        Result to print.
    show_payload : bool, optional
        Print the payload as JSON after a successful message, by default False.

    Returns
    -------
    int
        ``result.exit_code``.
    """
    if ctx.get("json_output"):
        print_json(result.as_dict())
        return result.exit_code

    if result.success:
        success(result.message)
        if show_payload and result.payload is not None:
            print_json(result.payload)
        return result.exit_code

    error(result.message)

    if isinstance(result.error, BaseException):
        if ctx.get("verbose"):
            traceback.print_exception(type(result.error), result.error, result.error.__traceback__)
    elif result.error is not None:
        print(json.dumps(result.error, indent=2, default=str), file=sys.stderr)

    if "service account" in result.message.lower():
        info("Run 'visionfi interactive' or 'visionfi config set-service-account PATH' to set one up.")

    return result.exit_code
