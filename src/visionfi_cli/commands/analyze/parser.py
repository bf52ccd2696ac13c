"""Parser configuration for analyze command."""

import argparse


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the analyze command parser.

    Parameters
    ----------
    subparsers : argparse._SubParsersAction
        Subparser action from main parser
    """
    parser = subparsers.add_parser(
        "analyze",
        help="Analyze a document",
        description="Submit a document for analysis with the given workflow",
    )

    parser.add_argument(
        "file",
        help="Path to the document to analyze",
    )

    parser.add_argument(
        "--workflow",
        "-w",
        required=True,
        help="Workflow key for analysis (see 'visionfi workflows')",
    )
