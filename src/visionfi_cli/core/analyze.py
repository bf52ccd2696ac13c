"""Document submission."""

import logging
from collections.abc import Callable
from pathlib import Path

from visionfi_cli.api.capabilities import ClientFactory, ConfigManager, DocumentAnalyzer
from visionfi_cli.core.auth import NO_SERVICE_ACCOUNT_MESSAGE, connect
from visionfi_cli.core.recent_jobs import remember_job
from visionfi_cli.core.results import CommandResult

logger = logging.getLogger(__name__)

NO_WORKFLOW_MESSAGE = "No workflow specified. Use --workflow option to specify analysis workflow."


def _read_bytes(path: Path) -> bytes:
    return Path(path).read_bytes()


def submit_document(
    client: DocumentAnalyzer,
    file_data: bytes,
    file_name: str,
    workflow_key: str,
    config: dict,
    config_manager: ConfigManager,
) -> CommandResult:
    """
    Submit document bytes to an authenticated client.

    On success the returned job UUID is recorded in ``config["recent_uuids"]``
    and the configuration is saved.

    Parameters
    ----------
    client : DocumentAnalyzer
        Authenticated API client.
    file_data : bytes
        Document contents.
    file_name : str
        File name reported to the API.
    workflow_key : str
        Workflow to run.
    config : dict
        Loaded configuration, updated in place.
    config_manager : ConfigManager
        Store used to persist the recent-jobs list.

    Returns
    -------
    CommandResult
        Payload ``{"uuid": ..., "response": ...}`` on success.
    """
    try:
        response = client.analyze_document(file_data, file_name, workflow_key)
    except Exception as e:
        return CommandResult.fail(f"Error submitting document: {e}", error=e)

    uuid = (response or {}).get("uuid")
    if not uuid:
        return CommandResult.fail("Document submitted but no UUID was returned.", payload=response)

    config["recent_uuids"] = remember_job(config.get("recent_uuids") or [], uuid)
    try:
        config_manager.save(config)
    except Exception as e:
        logger.warning("Could not save recent jobs: %s", e)

    logger.debug("Submitted %s with workflow %s as job %s", file_name, workflow_key, uuid)
    return CommandResult.ok("Document submitted successfully!", {"uuid": uuid, "response": response})


def analyze_document(
    file_path: str,
    workflow: str | None,
    config: dict,
    client_factory: ClientFactory,
    config_manager: ConfigManager,
    read_file: Callable[[Path], bytes] = _read_bytes,
) -> CommandResult:
    """
    Validate inputs, authenticate and submit a document for analysis.

    Checks run in order: service account configured, file exists, client
    authenticated, workflow given. No network call is made when a check
    before authentication fails.

    Parameters
    ----------
    file_path : str
        Path to the document.
    workflow : str or None
        Workflow key.
    config : dict
        Loaded configuration.
    client_factory : ClientFactory
        Callable building the API client.
    config_manager : ConfigManager
        Store used to persist the recent-jobs list.
    read_file : callable, optional
        Reads the document bytes, by default ``Path.read_bytes``.

    Returns
    -------
    CommandResult
        Result of the submission.
    """
    if not config.get("service_account_path"):
        return CommandResult.fail(NO_SERVICE_ACCOUNT_MESSAGE)

    path = Path(file_path).expanduser()
    if not path.is_file():
        return CommandResult.fail(f"File not found: {file_path}")

    client, failure = connect(config, client_factory)
    if failure:
        return failure

    if not workflow:
        return CommandResult.fail(NO_WORKFLOW_MESSAGE)

    try:
        file_data = read_file(path)
    except OSError as e:
        return CommandResult.fail(f"Failed to read file: {e}", error=e)

    return submit_document(client, file_data, path.name, workflow, config, config_manager)
