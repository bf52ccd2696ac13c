"""Parser configuration for auth command."""

import argparse

from visionfi_cli.lib.formatters import create_subparsers


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the auth command parser.

    Parameters
    ----------
    subparsers : argparse._SubParsersAction
        Subparser action from main parser
    """
    parser = subparsers.add_parser(
        "auth",
        help="Authentication commands",
        description="Check that the configured service account can access the API",
    )

    parser.set_defaults(_auth_parser=parser)

    auth_subparsers = create_subparsers(parser, "auth_subcommand")

    auth_subparsers.add_parser(
        "verify",
        help="Verify authentication",
    )
