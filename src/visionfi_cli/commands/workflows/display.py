"""Display formatters for workflows."""

from typing import Any

from visionfi_cli.lib.output import info, menu_option, warning


def workflow_entries(workflows: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Return the workflow list from a ``get_workflows`` response."""
    if not workflows or not workflows.get("success"):
        return []
    return list(workflows.get("data") or [])


def display_workflow_list(workflows: dict[str, Any] | None) -> None:
    """Print workflows as a two-column table.

    Parameters
    ----------
    workflows : dict[str, Any] or None
        ``get_workflows`` response
    """
    entries = workflow_entries(workflows)
    if not entries:
        warning("No workflows available.")
        return

    print()
    print("-" * 100)
    print(f"{'WORKFLOW KEY':<40} {'DESCRIPTION':<60}")
    print("-" * 100)
    for workflow in entries:
        key = workflow.get("workflow_key", "")
        description = workflow.get("description") or "No description"
        print(f"{key:<40} {description:<60}")
    print()
    info(f"Total: {len(entries)} workflow(s)")


def display_workflow_menu(workflows: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Print workflows as numbered menu entries and return them in order."""
    entries = workflow_entries(workflows)
    if not entries:
        warning("No workflows available.")
        return []

    for index, workflow in enumerate(entries, start=1):
        key = workflow.get("workflow_key", "")
        description = workflow.get("description") or "No description"
        menu_option(str(index), f"{key} - {description}")
    return entries
