"""Results retrieval with optional polling."""

import logging
from dataclasses import dataclass

from visionfi_cli.api.capabilities import ClientFactory, ConfigManager
from visionfi_cli.core.auth import connect
from visionfi_cli.core.recent_jobs import remember_job
from visionfi_cli.core.results import CommandResult
from visionfi_cli.exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_MS = 3000
DEFAULT_MAX_ATTEMPTS = 10

RESULTS_READY_MESSAGE = "Results retrieved successfully!"
ANALYSIS_ERROR_MESSAGE = "Analysis error occurred during processing."
NOT_READY_MESSAGE = "No results available yet. The job may still be processing."
NO_JOB_MESSAGE = "No job UUID specified."


@dataclass
class PollRequest:
    """
    Parameters for one results retrieval.

    Attributes
    ----------
    job_id : str
        Job UUID.
    wait : bool
        Poll until results are ready instead of checking once.
    poll_interval_ms : int
        Wait between attempts in milliseconds, used only when ``wait``.
    max_attempts : int
        Attempt budget, used only when ``wait``.

    Raises
    ------
    ValidationError
        If ``wait`` is set with a negative interval or fewer than one attempt.
    """

    job_id: str
    wait: bool = False
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self):
        if not self.wait:
            return
        if self.poll_interval_ms < 0:
            raise ValidationError("Poll interval must be 0 or greater", {"poll_interval_ms": self.poll_interval_ms})
        if self.max_attempts < 1:
            raise ValidationError("Max attempts must be at least 1", {"max_attempts": self.max_attempts})

    def effective(self) -> tuple[int, int]:
        """Return the ``(poll_interval_ms, max_attempts)`` actually sent."""
        if self.wait:
            return self.poll_interval_ms, self.max_attempts
        return 0, 1


def interpret_job_response(response: dict) -> CommandResult:
    """
    Map a ``get_results`` response onto a CommandResult.

    A job with results is a success, a job that finished with an error is a
    failure, and a job still running is a success with nothing to show yet.
    Presence is what counts: an empty ``results`` list or ``error`` mapping
    still decides the outcome.

    Parameters
    ----------
    response : dict
        Response with optional ``status``, ``results`` and ``error``.

    Returns
    -------
    CommandResult
        Mapped result.
    """
    response = response or {}
    status = response.get("status")

    if response.get("results") is not None:
        return CommandResult.ok(
            RESULTS_READY_MESSAGE, {"status": status, "results": response["results"]}
        )
    if response.get("error") is not None:
        return CommandResult.fail(
            ANALYSIS_ERROR_MESSAGE,
            payload={"status": status, "error": response["error"]},
            error=response["error"],
        )
    return CommandResult.ok(NOT_READY_MESSAGE, {"status": status})


def fetch_results(
    request: PollRequest,
    config: dict,
    client_factory: ClientFactory,
    config_manager: ConfigManager,
) -> CommandResult:
    """
    Retrieve the results of an analysis job.

    Authentication is checked first, then the job id. A non-empty id is
    recorded in ``config["recent_uuids"]`` (saved only when the list
    changes) before the delegated ``get_results`` call, which owns the
    retry loop and the wait between attempts.

    Parameters
    ----------
    request : PollRequest
        Job id and polling parameters.
    config : dict
        Loaded configuration. ``recent_uuids`` is updated in place.
    client_factory : ClientFactory
        Callable building the API client.
    config_manager : ConfigManager
        Store used to persist the recent-jobs list.

    Returns
    -------
    CommandResult
        See interpret_job_response for the three outcomes once the call
        is made.
    """
    client, failure = connect(config, client_factory)
    if failure:
        return failure

    if not request.job_id:
        return CommandResult.fail(NO_JOB_MESSAGE)

    recent = config.get("recent_uuids") or []
    updated = remember_job(recent, request.job_id)
    if updated != recent:
        config["recent_uuids"] = updated
        try:
            config_manager.save(config)
        except Exception as e:
            logger.warning("Could not save recent jobs: %s", e)

    poll_interval_ms, max_attempts = request.effective()
    logger.debug(
        "Fetching results for %s (interval=%dms, attempts=%d)",
        request.job_id,
        poll_interval_ms,
        max_attempts,
    )

    try:
        response = client.get_results(request.job_id, poll_interval_ms, max_attempts)
    except Exception as e:
        return CommandResult.fail(f"Failed to retrieve results: {e}", error=e)

    return interpret_job_response(response)
