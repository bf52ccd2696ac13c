"""Argument parser for interactive command."""

from typing import Any

from visionfi_cli.lib.formatters import CapitalizedHelpFormatter


def register_parser(subparsers: Any) -> None:
    """Register interactive command parser.

    Parameters
    ----------
    subparsers : Any
        Subparsers from main argument parser
    """
    subparsers.add_parser(
        "interactive",
        help="Start interactive mode (default when no command is given)",
        description="Menu-driven interface for document analysis, results and configuration.",
        formatter_class=CapitalizedHelpFormatter,
    )
