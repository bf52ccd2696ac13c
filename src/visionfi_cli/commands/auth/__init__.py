"""Auth command for checking service account credentials.

Available subcommands:
    visionfi auth verify     Verify authentication with the API
"""

from .handlers import handle
from .parser import register_parser

__all__ = ["register_parser", "handle"]
