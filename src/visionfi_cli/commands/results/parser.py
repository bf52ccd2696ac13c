"""Parser configuration for results command."""

import argparse

from visionfi_cli.core.poller import DEFAULT_MAX_ATTEMPTS, DEFAULT_POLL_INTERVAL_MS


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the results command parser.

    Parameters
    ----------
    subparsers : argparse._SubParsersAction
        Subparser action from main parser
    """
    parser = subparsers.add_parser(
        "results",
        help="Get analysis results",
        description="Retrieve the results of a submitted analysis job",
    )

    parser.add_argument(
        "uuid",
        help="Job UUID returned by 'visionfi analyze'",
    )

    parser.add_argument(
        "--wait",
        action="store_true",
        help="Wait for results if not yet available",
    )

    parser.add_argument(
        "--poll-interval",
        type=int,
        default=DEFAULT_POLL_INTERVAL_MS,
        metavar="MS",
        help=f"Polling interval in milliseconds when using --wait (default: {DEFAULT_POLL_INTERVAL_MS})",
    )

    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        metavar="N",
        help=f"Maximum number of polling attempts when using --wait (default: {DEFAULT_MAX_ATTEMPTS})",
    )
