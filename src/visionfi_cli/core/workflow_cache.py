"""Time-to-live cache for the workflow catalog."""

import logging
import time
from collections.abc import Callable
from typing import Any

from visionfi_cli.api.capabilities import WorkflowLister
from visionfi_cli.core.results import CommandResult

logger = logging.getLogger(__name__)


class WorkflowCache:
    """
    Cache of the last successfully fetched workflow list.

    The entry is replaced wholesale on each successful fetch and left as is
    when a fetch fails, so a stale list stays available until the next
    successful refresh.

    Attributes
    ----------
    ttl_seconds : int
        Validity window in seconds. Zero or less means always expired.
    workflows : dict or None
        Last successful ``get_workflows`` response.
    cached_at : float
        Clock value recorded when ``workflows`` was stored.
    """

    def __init__(self, ttl_seconds: int, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self.workflows: dict[str, Any] | None = None
        self.cached_at: float = 0.0
        self._clock = clock

    def is_expired(self, now: float | None = None) -> bool:
        """Return True when there is no entry or it is older than the TTL."""
        if self.workflows is None or self.ttl_seconds <= 0:
            return True
        if now is None:
            now = self._clock()
        return now - self.cached_at > self.ttl_seconds

    def clear(self) -> None:
        self.workflows = None
        self.cached_at = 0.0

    def get(self, client: WorkflowLister | None, force_refresh: bool = False) -> CommandResult:
        """
        Return the workflow list, fetching it when needed.

        Parameters
        ----------
        client : WorkflowLister or None
            API client used to fetch on a miss.
        force_refresh : bool, optional
            Fetch even if the cached entry is fresh, by default False.

        Returns
        -------
        CommandResult
            Payload has ``workflows``, ``cached_at`` and ``from_cache``. On
            failure the cache is untouched and the payload holds the raw
            response, if any.
        """
        if client is None:
            return CommandResult.fail("Client not initialized")

        if not force_refresh and not self.is_expired():
            logger.debug("Using cached workflows from %s", self.cached_at)
            return CommandResult.ok(
                "Using cached workflows",
                {"workflows": self.workflows, "cached_at": self.cached_at, "from_cache": True},
            )

        try:
            response = client.get_workflows()
        except Exception as e:
            logger.debug("Workflow fetch failed: %s", e)
            return CommandResult.fail(f"Error fetching workflows: {e}", error=e)

        if not response or not response.get("success"):
            return CommandResult.fail("Failed to fetch workflows", payload=response)

        self.workflows = response
        self.cached_at = self._clock()
        logger.debug("Cached %d workflows", len(response.get("data") or []))

        return CommandResult.ok(
            "Workflows fetched successfully",
            {"workflows": self.workflows, "cached_at": self.cached_at, "from_cache": False},
        )
