"""Handlers for config command."""

import sys

import yaml

from visionfi_cli.core import account
from visionfi_cli.lib.command_helpers import create_session, get_config_manager, report_result, require_config
from visionfi_cli.lib.formatters import format_cache_ttl
from visionfi_cli.lib.output import error, print_key_value
from visionfi_cli.lib.paths import get_default_key_path


def handle(ctx: dict) -> int:
    """Handle config commands.

    Parameters
    ----------
    ctx : dict
        Command context

    Returns
    -------
    int
        Exit code
    """
    args = ctx["args"]

    if not getattr(args, "config_subcommand", None):
        if hasattr(args, "_config_parser"):
            args._config_parser.print_help()
        else:
            error("No subcommand specified. Use 'visionfi config --help'")
        return 1

    handlers = {
        "show": handle_show,
        "path": handle_path,
        "set": handle_set,
        "cache-ttl": handle_cache_ttl,
        "clear-recent": handle_clear_recent,
        "set-service-account": handle_set_service_account,
        "setup-default-key": handle_setup_default_key,
    }

    handler = handlers.get(args.config_subcommand)
    if handler is None:
        error(f"Unknown config subcommand: {args.config_subcommand}")
        return 1

    return handler(ctx)


def handle_show(ctx: dict) -> int:
    """Show current configuration.

    Parameters
    ----------
    ctx : dict
        Command context

    Returns
    -------
    int
        Exit code
    """
    args = ctx["args"]
    config = require_config(ctx)

    if args.raw:
        yaml.safe_dump(config, sys.stdout, default_flow_style=False, sort_keys=False)
        return 0

    default_key = get_default_key_path()

    print("Configuration:")
    print_key_value("Service Account", config.get("service_account_path") or "Not configured", 1)
    print_key_value("API Endpoint", config.get("api_endpoint"), 1)
    print_key_value(
        "Default Key Location",
        f"{'Found' if default_key.exists() else 'Not found'} ({default_key})",
        1,
    )
    print_key_value("Workflow Cache Time", format_cache_ttl(config.get("workflow_cache_ttl", 0)), 1)
    print_key_value("Debug Mode", "ON" if config.get("debug_mode") else "OFF", 1)
    print_key_value("Test Mode", "ON" if config.get("test_mode") else "OFF", 1)

    recent = config.get("recent_uuids") or []
    print()
    print("Recent jobs:")
    if recent:
        for uuid in recent:
            print(f"  - {uuid}")
    else:
        print("  (none)")

    return 0


def handle_path(ctx: dict) -> int:
    print(get_config_manager(ctx).config_path)
    return 0


def handle_set(ctx: dict) -> int:
    args = ctx["args"]
    result = account.set_config_value(create_session(ctx), args.key, args.value)
    return report_result(ctx, result)


def handle_cache_ttl(ctx: dict) -> int:
    args = ctx["args"]
    result = account.set_cache_ttl(create_session(ctx), args.ttl)
    return report_result(ctx, result)


def handle_clear_recent(ctx: dict) -> int:
    result = account.clear_recent_jobs(create_session(ctx))
    return report_result(ctx, result)


def handle_set_service_account(ctx: dict) -> int:
    args = ctx["args"]
    result = account.set_service_account(create_session(ctx), args.path)
    return report_result(ctx, result)


def handle_setup_default_key(ctx: dict) -> int:
    args = ctx["args"]
    result = account.setup_default_service_account(create_session(ctx), args.path)
    return report_result(ctx, result)
