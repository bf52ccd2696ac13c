"""Console output for the visionfi CLI: status lines, menus and data dumps."""

import json
import sys
from typing import Any

# None = auto-detect, True = force on, False = force off
_color_enabled = None

BANNER = r"""
 __     ___     _             _____ _
 \ \   / (_)___(_) ___  _ __ |  ___(_)
  \ \ / /| / __| |/ _ \| '_ \| |_  | |
   \ V / | \__ \ | (_) | | | |  _| | |
    \_/  |_|___/_|\___/|_| |_|_|   |_|
"""

TAGLINE = "Document analysis from the command line"


class Colors:
    """ANSI escape sequences used by the CLI."""

    RESET = "\033[0m"
    BOLD = "\033[1m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"


# Message kind -> (symbol, color, stream name)
_STATUS_STYLES = {
    "success": ("✓", Colors.GREEN, "stdout"),
    "error": ("✗", Colors.RED, "stderr"),
    "warning": ("⚠", Colors.YELLOW, "stdout"),
}


def set_color_enabled(enabled: bool) -> None:
    """
    Force colored output on or off, overriding terminal detection.

    Parameters
    ----------
    enabled : bool
        True to enable colors, False to disable.
    """
    global _color_enabled
    _color_enabled = enabled


def supports_color() -> bool:
    """
    Check whether colors should be written.

    Returns
    -------
    bool
        The forced preference if one was set, otherwise whether stdout is a
        TTY on a non-Windows platform.
    """
    if _color_enabled is not None:
        return _color_enabled
    return sys.stdout.isatty() and not sys.platform.startswith("win")


def colorize(text: str, color: str) -> str:
    """Wrap text in an ANSI color when colors are enabled."""
    if supports_color():
        return f"{color}{text}{Colors.RESET}"
    return text


def _status(kind: str, message: str) -> None:
    symbol, color, stream = _STATUS_STYLES[kind]
    # stream looked up per call, sys.stdout may be replaced
    print(f"{colorize(symbol, color)} {message}", file=getattr(sys, stream))


def success(message: str) -> None:
    """Print a message with a green check mark."""
    _status("success", message)


def error(message: str) -> None:
    """
    Print an error message to stderr.

    Errors are written to stderr, keeping stdout for ``--json`` output.

    Parameters
    ----------
    message : str
        Error message to display.
    """
    _status("error", message)


def warning(message: str) -> None:
    """Print a message with a yellow warning sign."""
    _status("warning", message)


def info(message: str) -> None:
    """Print an indented informational line."""
    print(f"  {message}")


def title(message: str) -> None:
    """Print a menu title, preceded by a blank line."""
    print(f"\n{colorize(message, Colors.BOLD + Colors.MAGENTA)}")


def subheader(message: str) -> None:
    """Print a section heading in cyan."""
    print(colorize(message, Colors.CYAN))


def menu_option(key: str, description: str) -> None:
    """
    Print a single menu entry as ``[key] description``.

    Parameters
    ----------
    key : str
        Key the user types to pick the entry.
    description : str
        Entry label.
    """
    print(f"  {colorize(f'[{key}]', Colors.YELLOW)} {description}")


def status_line(label: str, value: str, good: bool) -> None:
    """
    Print a ``label: value`` line with the value green when good, red otherwise.

    Used for the authentication state in the main menu header.

    Parameters
    ----------
    label : str
        Line label.
    value : str
        Displayed value.
    good : bool
        Whether the value is the healthy state.
    """
    print(f"{label}: {colorize(value, Colors.GREEN if good else Colors.RED)}")


def display_banner() -> None:
    """Print the VisionFi banner and tagline."""
    print(colorize(BANNER, Colors.BLUE))
    print(f"  {TAGLINE}\n")


def print_key_value(key: str, value: str, indent: int = 0) -> None:
    """
    Print a ``key: value`` pair with the key in cyan.

    Parameters
    ----------
    key : str
        Key to print.
    value : str
        Value to print.
    indent : int, optional
        Number of 2-space indents, by default 0.
    """
    print(f"{'  ' * indent}{colorize(key, Colors.CYAN)}: {value}")


def print_dict(data: dict, indent: int = 0) -> None:
    """
    Print a nested mapping such as client info, one key per line.

    Nested mappings are printed under their key one level deeper; lists are
    printed comma separated.

    Parameters
    ----------
    data : dict
        Mapping to print.
    indent : int, optional
        Number of 2-space indents, by default 0.
    """
    for key, value in data.items():
        if isinstance(value, dict):
            print(f"{'  ' * indent}{colorize(str(key), Colors.CYAN)}:")
            print_dict(value, indent + 1)
        elif isinstance(value, list):
            print_key_value(str(key), ", ".join(str(item) for item in value), indent)
        else:
            print_key_value(str(key), str(value), indent)


def print_json(data: Any) -> None:
    """Pretty-print data (job results, errors) as indented JSON."""
    print(json.dumps(data, indent=2, default=str))


def clear_screen() -> None:
    """Clear the terminal when writing to a TTY."""
    if sys.stdout.isatty():
        print("\033[2J\033[H", end="")
