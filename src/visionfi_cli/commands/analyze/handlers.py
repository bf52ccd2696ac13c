"""Handler for the analyze command."""

from typing import Any

from visionfi_cli.core.analyze import analyze_document
from visionfi_cli.lib.command_helpers import (
    get_client_factory,
    get_config_manager,
    report_result,
    require_config,
)
from visionfi_cli.lib.output import info


def handle(ctx: dict[str, Any]) -> int:
    """Handle analyze command.

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

    result = analyze_document(
        args.file,
        args.workflow,
        require_config(ctx),
        get_client_factory(ctx),
        get_config_manager(ctx),
    )
    exit_code = report_result(ctx, result)

    if result.success and not ctx.get("json_output"):
        uuid = result.payload["uuid"]
        info(f"Job UUID: {uuid}")
        print()
        info("You can retrieve results using this UUID with:")
        info(f"  visionfi results {uuid}")

    return exit_code
