"""Handler functions for auth subcommands."""

from typing import Any

from visionfi_cli.core.auth import authenticate
from visionfi_cli.lib.command_helpers import get_client_factory, report_result, require_config
from visionfi_cli.lib.output import error


def handle(ctx: dict[str, Any]) -> int:
    """Handle auth command.

    Parameters
    ----------
    ctx : dict[str, Any]
        Command context

    Returns
    -------
    int
        Exit code
    """
    args = ctx["args"]

    if not getattr(args, "auth_subcommand", None):
        if hasattr(args, "_auth_parser"):
            args._auth_parser.print_help()
        else:
            error("No subcommand specified. Use 'visionfi auth --help'")
        return 1

    if args.auth_subcommand == "verify":
        return handle_verify(ctx)

    error(f"Unknown subcommand: {args.auth_subcommand}")
    return 1


def handle_verify(ctx: dict[str, Any]) -> int:
    """Handle auth verify command.

    Parameters
    ----------
    ctx : dict[str, Any]
        Command context

    Returns
    -------
    int
        Exit code
    """
    result = authenticate(require_config(ctx), get_client_factory(ctx))
    return report_result(ctx, result)
