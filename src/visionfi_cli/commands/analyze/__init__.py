"""Analyze command for submitting documents.

Usage:
    visionfi analyze <file> --workflow <key>
"""

from .handlers import handle
from .parser import register_parser

__all__ = ["register_parser", "handle"]
