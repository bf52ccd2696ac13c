"""Results command for retrieving analysis results.

Usage:
    visionfi results <uuid> [--wait] [--poll-interval MS] [--max-attempts N]
"""

from .handlers import handle
from .parser import register_parser

__all__ = ["register_parser", "handle"]
