"""Handler for the workflows command."""

from typing import Any

from visionfi_cli.core.auth import connect
from visionfi_cli.lib.command_helpers import create_session, report_result

from . import display


def handle(ctx: dict[str, Any]) -> int:
    """Handle workflows command.

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
    session = create_session(ctx)

    client, failure = connect(session.config, session.client_factory)
    if failure:
        return report_result(ctx, failure)
    session.client = client

    result = session.get_workflows(force_refresh=args.refresh)
    if ctx.get("json_output") or not result.success:
        return report_result(ctx, result)

    display.display_workflow_list(result.payload["workflows"])
    return result.exit_code
