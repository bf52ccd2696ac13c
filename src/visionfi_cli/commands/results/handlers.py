"""Handler for the results command."""

from typing import Any

from visionfi_cli.core.poller import PollRequest, fetch_results
from visionfi_cli.exceptions import ValidationError
from visionfi_cli.lib.command_helpers import (
    get_client_factory,
    get_config_manager,
    report_result,
    require_config,
)
from visionfi_cli.lib.output import error, info, print_json, warning


def handle(ctx: dict[str, Any]) -> int:
    """Handle results command.

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

    try:
        request = PollRequest(
            job_id=(args.uuid or "").strip(),
            wait=args.wait,
            poll_interval_ms=args.poll_interval,
            max_attempts=args.max_attempts,
        )
    except ValidationError as e:
        error(str(e))
        return 1

    if args.wait and not ctx.get("json_output"):
        info(
            f"Waiting for results (every {request.poll_interval_ms}ms, "
            f"up to {request.max_attempts} attempts)..."
        )

    result = fetch_results(
        request,
        require_config(ctx),
        get_client_factory(ctx),
        get_config_manager(ctx),
    )

    if ctx.get("json_output") or not result.success:
        return report_result(ctx, result)

    status = (result.payload or {}).get("status")

    if "results" in result.payload:
        report_result(ctx, result)
        if status:
            info(f"Status: {status}")
        print()
        print_json(result.payload["results"])
        return result.exit_code

    # Job still running
    if status:
        info(f"Status: {status}")
    warning(result.message)
    if not args.wait:
        info("Try using --wait option to poll for results.")
    return result.exit_code
