"""Session state shared across the operations of one CLI run."""

import logging

from visionfi_cli.api.capabilities import ApiClient, ClientFactory, ConfigManager
from visionfi_cli.core.auth import initialize_client
from visionfi_cli.core.recent_jobs import remember_job
from visionfi_cli.core.results import CommandResult
from visionfi_cli.core.workflow_cache import WorkflowCache

logger = logging.getLogger(__name__)


class Session:
    """
    Mutable state owned by a single CLI run.

    Holds the loaded configuration (including the persisted recent-jobs
    list), the config store, the API client once built and the in-memory
    workflow cache. Every change to the configuration is written back
    through ``config_manager`` immediately.

    Parameters
    ----------
    config : dict
        Loaded configuration.
    config_manager : ConfigManager
        Store used to persist configuration changes.
    client_factory : ClientFactory
        Callable building API clients.
    """

    def __init__(self, config: dict, config_manager: ConfigManager, client_factory: ClientFactory):
        self.config = config
        self.config_manager = config_manager
        self.client_factory = client_factory
        self.client: ApiClient | None = None
        self.workflow_cache = WorkflowCache(int(config.get("workflow_cache_ttl", 0)))

    @property
    def recent_jobs(self) -> list[str]:
        return list(self.config.get("recent_uuids") or [])

    @property
    def debug(self) -> bool:
        return bool(self.config.get("debug_mode"))

    def save(self) -> None:
        self.config_manager.save(self.config)

    def initialize_client(self, service_account_path: str | None = None) -> CommandResult:
        """
        Build the API client and keep it on the session.

        Parameters
        ----------
        service_account_path : str, optional
            Key to use, by default the configured ``service_account_path``.

        Returns
        -------
        CommandResult
            Result of client construction.
        """
        path = service_account_path or self.config.get("service_account_path")
        if not path:
            return CommandResult.fail("No service account configured.")

        result = initialize_client(path, self.config, self.client_factory)
        if result.success:
            self.client = result.payload["client"]
        else:
            logger.debug("Client initialization failed: %s", result.message)
        return result

    def remember_job(self, job_id: str) -> None:
        """Record a job in the recent list and persist it if it changed."""
        recent = self.recent_jobs
        updated = remember_job(recent, job_id)
        if updated != recent:
            self.config["recent_uuids"] = updated
            self.save()

    def get_workflows(self, force_refresh: bool = False) -> CommandResult:
        """Return workflows through the session cache."""
        return self.workflow_cache.get(self.client, force_refresh=force_refresh)
