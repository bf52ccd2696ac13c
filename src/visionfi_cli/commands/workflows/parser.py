"""Parser configuration for workflows command."""

import argparse


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the workflows command parser.

    Parameters
    ----------
    subparsers : argparse._SubParsersAction
        Subparser action from main parser
    """
    parser = subparsers.add_parser(
        "workflows",
        help="List available analysis workflows",
        description="List the workflows your account can use with 'visionfi analyze'",
    )

    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Bypass the workflow cache",
    )
