"""Configuration management commands.

Available subcommands:
    visionfi config show                 Show current configuration
    visionfi config path                 Show config file path
    visionfi config set                  Set config value
    visionfi config cache-ttl            Set workflow cache time (e.g. 30s, 10m, 2h)
    visionfi config clear-recent         Clear recent job UUIDs
    visionfi config set-service-account  Use a service account key file
    visionfi config setup-default-key    Copy a key to the default location and use it
"""

from .handlers import handle
from .parser import register_parser

__all__ = ["register_parser", "handle"]
