"""Workflows command for listing available analysis workflows.

Usage:
    visionfi workflows [--refresh]
"""

from .handlers import handle
from .parser import register_parser

__all__ = ["register_parser", "handle"]
