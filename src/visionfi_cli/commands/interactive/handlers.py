"""Handler for interactive command."""

from typing import Any

from visionfi_cli.lib.command_helpers import create_session

from .menu import InteractiveMenu


def handle(ctx: dict[str, Any]) -> int:
    """Run the interactive menu until the user quits.

    Parameters
    ----------
    ctx : dict[str, Any]
        Command context. An optional ``prompt`` callable replaces ``input``.

    Returns
    -------
    int
        Exit code
    """
    session = create_session(ctx)
    menu = InteractiveMenu(session, prompt=ctx.get("prompt") or input)
    return menu.run()
