"""Argument parser for config command."""

from typing import Any

from visionfi_cli.core.account import SETTABLE_KEYS
from visionfi_cli.lib.formatters import CapitalizedHelpFormatter, create_subparsers


def register_parser(subparsers: Any) -> None:
    """Register config command parser.

    Parameters
    ----------
    subparsers : Any
        Subparsers from main argument parser
    """
    parser = subparsers.add_parser(
        "config",
        help="Configuration management",
        description="Manage configuration and service account settings for the visionfi CLI.",
        epilog="""Examples:
  visionfi config show
  visionfi config set api_endpoint https://platform.visionfi.ai/api/v1
  visionfi config cache-ttl 10m
  visionfi config set-service-account ~/keys/visionfi.json
""",
        formatter_class=CapitalizedHelpFormatter,
    )
    parser.set_defaults(_config_parser=parser)

    config_subparsers = create_subparsers(parser, "config_subcommand")

    show_parser = config_subparsers.add_parser("show", help="Show current configuration")
    show_parser.add_argument("--raw", action="store_true", help="Show raw YAML")

    config_subparsers.add_parser("path", help="Show config file path")

    set_parser = config_subparsers.add_parser("set", help="Set config value")
    set_parser.add_argument("key", choices=SETTABLE_KEYS, help="Config key")
    set_parser.add_argument("value", help="New value")

    ttl_parser = config_subparsers.add_parser("cache-ttl", help="Set workflow cache time")
    ttl_parser.add_argument("ttl", help="Cache time, e.g. 30s, 10m, 2h (plain numbers are seconds)")

    config_subparsers.add_parser("clear-recent", help="Clear recent job UUIDs")

    sa_parser = config_subparsers.add_parser(
        "set-service-account", help="Use a service account key file"
    )
    sa_parser.add_argument("path", help="Path to service account JSON key")

    default_key_parser = config_subparsers.add_parser(
        "setup-default-key", help="Copy a key to the default location and use it"
    )
    default_key_parser.add_argument("path", help="Path to service account JSON key to copy")
