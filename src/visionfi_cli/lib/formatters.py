"""
Parsing and Formatting Functions.

This module provides the argparse help formatter shared by all commands and
the cache TTL text protocol used by the workflow cache settings.

Functions
---------
create_subparsers : Create nested subparsers with consistent formatting
parse_cache_ttl : Parse TTL strings like "30s", "10m", "2h" into seconds
format_cache_ttl : Format a TTL in seconds for display

Classes
-------
CapitalizedHelpFormatter : Custom argparse formatter with capitalized section titles
"""

import argparse
import re

from visionfi_cli.exceptions import ValidationError

INVALID_TTL_MESSAGE = "Invalid cache TTL. Must be a positive number."
INVALID_TTL_FORMAT_MESSAGE = "Invalid format. Examples: 30s, 10m, 2h"

_TTL_UNITS = {"s": 1, "m": 60, "h": 3600}
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")


class CapitalizedHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """
    Custom help formatter that capitalizes section titles.

    Extends RawDescriptionHelpFormatter to:
    - Capitalize "usage:" to "Usage:"
    - Add newline after usage for better readability
    - Preserve raw formatting for description text
    """

    def add_usage(self, usage, actions, groups, prefix=None):
        if prefix is None:
            prefix = "Usage:\n  "
        return super().add_usage(usage, actions, groups, prefix)


def create_subparsers(parser: argparse.ArgumentParser, dest: str, **kwargs) -> argparse._SubParsersAction:
    """
    Create subparsers with consistent formatting applied automatically.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parent parser to add subparsers to
    dest : str
        Destination attribute name for storing the subcommand
    **kwargs
        Additional arguments passed to add_subparsers()

    Returns
    -------
    argparse._SubParsersAction
        Subparsers object whose parsers use CapitalizedHelpFormatter and
        an "Options" section title.
    """
    defaults = {
        "help": "",
        "title": "Subcommands",
    }
    defaults.update(kwargs)

    subparsers = parser.add_subparsers(dest=dest, **defaults)

    original_add_parser = subparsers.add_parser

    def custom_add_parser(*args, **parse_kwargs):
        if "formatter_class" not in parse_kwargs:
            parse_kwargs["formatter_class"] = CapitalizedHelpFormatter
        subparser = original_add_parser(*args, **parse_kwargs)
        subparser._optionals.title = "Options"
        return subparser

    subparsers.add_parser = custom_add_parser

    return subparsers


def parse_cache_ttl(ttl: str) -> int:
    """
    Parse a cache TTL string into seconds.

    Parameters
    ----------
    ttl : str
        TTL string with format ``<number>[unit]``, case-insensitive.
        Supported units: s (seconds), m (minutes), h (hours). Without a
        unit the number is taken as seconds.

    Returns
    -------
    int
        TTL in seconds.

    Raises
    ------
    ValidationError
        With INVALID_TTL_MESSAGE if the value is not a number or is negative,
        with INVALID_TTL_FORMAT_MESSAGE if digits are followed by garbage.

    Examples
    --------
    >>> parse_cache_ttl("10m")
    600
    >>> parse_cache_ttl(" 2H ")
    7200
    >>> parse_cache_ttl("90")
    90
    """
    normalized = str(ttl).strip().lower()

    multiplier = 1
    number = normalized
    if normalized and normalized[-1] in _TTL_UNITS:
        multiplier = _TTL_UNITS[normalized[-1]]
        number = normalized[:-1].strip()

    match = _LEADING_INT_RE.match(number)
    if not match:
        raise ValidationError(INVALID_TTL_MESSAGE)
    if match.end() != len(number):
        raise ValidationError(INVALID_TTL_FORMAT_MESSAGE)

    seconds = int(number) * multiplier
    if seconds < 0:
        raise ValidationError(INVALID_TTL_MESSAGE)

    return seconds


def format_cache_ttl(seconds: int) -> str:
    """
    Format a cache TTL for display.

    Picks the largest whole unit and drops any remainder, so the result is
    not meant to be parsed back.

    Parameters
    ----------
    seconds : int
        TTL in seconds.

    Returns
    -------
    str
        Human-readable TTL.

    Examples
    --------
    >>> format_cache_ttl(45)
    '45 seconds'
    >>> format_cache_ttl(90)
    '1 minute'
    >>> format_cache_ttl(7200)
    '2 hours'
    """
    if seconds < 60:
        return f"{seconds} seconds"
    if seconds < 3600:
        minutes = seconds // 60
        return f"{minutes} minute{'s' if minutes != 1 else ''}"
    hours = seconds // 3600
    return f"{hours} hour{'s' if hours != 1 else ''}"
