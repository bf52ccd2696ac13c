"""Main CLI entry point for visionfi."""

import argparse
import logging
import sys
from pathlib import Path

from visionfi_cli import __version__
from visionfi_cli.api.client import create_client
from visionfi_cli.config.loader import ConfigLoader
from visionfi_cli.lib.formatters import CapitalizedHelpFormatter
from visionfi_cli.lib.logger import setup_logger
from visionfi_cli.lib.output import error, info, set_color_enabled
from visionfi_cli.lib.paths import ensure_config_dir

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser with all commands and subcommands.

    Configures the main argument parser with global options and registers
    all command-specific subparsers for the visionfi CLI.

    Returns
    -------
    argparse.ArgumentParser
        Configured argument parser with all commands registered.
    """
    parser = argparse.ArgumentParser(
        prog="visionfi",
        description="Command-line client for the VisionFi document analysis platform",
        formatter_class=CapitalizedHelpFormatter,
    )

    # Global options
    parser.add_argument("--version", "-v", action="version", version=f"visionfi {__version__}")
    parser.add_argument(
        "--config", "-c", type=Path, help="Config file path (default: ~/.config/visionfi/config.yaml)"
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")

    # Customize main parser options title
    parser._optionals.title = "Options"

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Monkey-patch add_parser to automatically set Options title and formatter
    original_add_parser = subparsers.add_parser

    def custom_add_parser(*args, **kwargs):
        # Use CapitalizedHelpFormatter if no formatter_class specified
        if "formatter_class" not in kwargs:
            kwargs["formatter_class"] = CapitalizedHelpFormatter
        subparser = original_add_parser(*args, **kwargs)
        subparser._optionals.title = "Options"
        return subparser

    subparsers.add_parser = custom_add_parser

    # Import and register command parsers
    from visionfi_cli.commands import analyze, auth, config_cmd, interactive, results, workflows

    auth.register_parser(subparsers)
    analyze.register_parser(subparsers)
    results.register_parser(subparsers)
    workflows.register_parser(subparsers)
    config_cmd.register_parser(subparsers)
    interactive.register_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point for the visionfi command.

    Parses command-line arguments, loads configuration, creates command context,
    and routes execution to the appropriate command handler. Running without a
    command starts interactive mode.

    Parameters
    ----------
    argv : list of str, optional
        Arguments to parse, by default ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit code: 0 for success, 1 for command failure, 2 for configuration error,
        130 for keyboard interrupt.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Set color preference based on flag
    if args.no_color:
        set_color_enabled(False)

    setup_logger(verbose=args.verbose)

    if not args.command:
        args.command = "interactive"

    # Ensure config directory exists
    try:
        ensure_config_dir()
    except Exception as e:
        error(f"Failed to create config directory: {e}")
        return 2

    # Load configuration
    config_loader = ConfigLoader(config_path=args.config)
    try:
        config = config_loader.load()
    except Exception as e:
        if args.verbose:
            import traceback

            traceback.print_exc()
        error(f"Failed to load configuration: {e}")
        info(f"Check the config file at {config_loader.config_path}")
        return 2

    if config.get("debug_mode") and not args.verbose:
        setup_logger(verbose=True)

    logger.debug("Loaded configuration from %s", config_loader.config_path)

    # Create context for commands
    ctx = {
        "config": config,
        "config_manager": config_loader,
        "client_factory": create_client,
        "verbose": args.verbose,
        "json_output": args.json,
        "args": args,
    }

    # Route to command handler
    try:
        if args.command == "auth":
            from visionfi_cli.commands import auth

            return auth.handle(ctx)
        elif args.command == "analyze":
            from visionfi_cli.commands import analyze

            return analyze.handle(ctx)
        elif args.command == "results":
            from visionfi_cli.commands import results

            return results.handle(ctx)
        elif args.command == "workflows":
            from visionfi_cli.commands import workflows

            return workflows.handle(ctx)
        elif args.command == "config":
            from visionfi_cli.commands import config_cmd

            return config_cmd.handle(ctx)
        elif args.command == "interactive":
            from visionfi_cli.commands import interactive

            return interactive.handle(ctx)
        else:
            error(f"Command '{args.command}' not yet implemented")
            return 1

    except KeyboardInterrupt:
        print()
        return 130
    except Exception as e:
        error(f"Command failed: {e}")
        if ctx["verbose"]:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
