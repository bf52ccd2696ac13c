"""Narrow interfaces the command logic needs from the API client and config store.

The concrete VisionFiClient and ConfigLoader satisfy these; tests pass small
fake classes instead.
"""

from typing import Any, Protocol


class AuthVerifier(Protocol):
    def verify_auth(self) -> dict[str, Any]: ...


class ResultsFetcher(AuthVerifier, Protocol):
    def get_results(
        self, job_id: str, poll_interval_ms: int = 0, max_attempts: int = 1
    ) -> dict[str, Any]: ...


class WorkflowLister(Protocol):
    def get_workflows(self) -> dict[str, Any]: ...


class DocumentAnalyzer(AuthVerifier, Protocol):
    def analyze_document(
        self, file_data: bytes, file_name: str, analysis_type: str
    ) -> dict[str, Any]: ...


class ClientInfoProvider(Protocol):
    def get_client_info(self) -> dict[str, Any]: ...


class ApiClient(ResultsFetcher, WorkflowLister, DocumentAnalyzer, ClientInfoProvider, Protocol):
    """Everything the interactive session uses."""


class ClientFactory(Protocol):
    def __call__(self, service_account_path: str, api_base_url: str) -> Any: ...


class ConfigManager(Protocol):
    def load(self) -> dict: ...

    def save(self, config: dict) -> None: ...
