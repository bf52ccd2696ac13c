"""HTTP client for the VisionFi API."""

import logging
import time
from typing import Any
from urllib.parse import quote

import google.auth.exceptions
import requests
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from visionfi_cli.exceptions import APIError, AuthenticationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60


class VisionFiClient:
    """Client for the VisionFi document analysis API.

    Requests are authenticated with a Google-signed ID token minted from a
    service account key, with the API base URL as the token audience.

    Parameters
    ----------
    service_account_path : str
        Path to the service account JSON key.
    api_base_url : str
        API base URL (e.g. https://platform.visionfi.ai/api/v1).
    timeout : float
        Per-request timeout in seconds.

    Raises
    ------
    AuthenticationError
        If the service account key cannot be read.
    """

    def __init__(self, service_account_path: str, api_base_url: str, timeout: float = DEFAULT_TIMEOUT):
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout

        try:
            self._credentials = service_account.IDTokenCredentials.from_service_account_file(
                str(service_account_path),
                target_audience=self.api_base_url,
            )
        except (OSError, ValueError) as e:
            raise AuthenticationError(
                f"Could not load service account key: {e}",
                {"path": str(service_account_path)},
            )

        self._session = requests.Session()

    def _token(self) -> str:
        if not self._credentials.valid:
            try:
                self._credentials.refresh(Request())
            except google.auth.exceptions.GoogleAuthError as e:
                raise AuthenticationError(f"Failed to obtain access token: {e}")
        return self._credentials.token

    def _request(self, method: str, path: str, **kwargs) -> dict[str, Any]:
        url = f"{self.api_base_url}/{path}"
        headers = {"Authorization": f"Bearer {self._token()}"}

        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise APIError(f"HTTP {status_code} from {path}", endpoint=path, status_code=status_code)
        except requests.RequestException as e:
            raise APIError(f"Request to {path} failed: {e}", endpoint=path)

        try:
            return response.json()
        except ValueError:
            raise APIError(f"Invalid JSON response from {path}", endpoint=path)

    def verify_auth(self) -> dict[str, Any]:
        """Verify the service account is accepted by the API.

        Returns
        -------
        dict[str, Any]
            Response whose ``data`` field is truthy when authenticated.
        """
        return self._request("GET", "auth/verify")

    def get_client_info(self) -> dict[str, Any]:
        """Get account information for the authenticated client.

        Returns
        -------
        dict[str, Any]
            Response with ``success`` and ``data`` fields.
        """
        return self._request("GET", "client/info")

    def get_workflows(self) -> dict[str, Any]:
        """List the analysis workflows available to this client.

        Returns
        -------
        dict[str, Any]
            Response with ``success`` and ``data`` (list of workflows with
            ``workflow_key`` and ``description``).
        """
        return self._request("GET", "workflows")

    def analyze_document(self, file_data: bytes, file_name: str, analysis_type: str) -> dict[str, Any]:
        """Submit a document for analysis.

        Parameters
        ----------
        file_data : bytes
            Document contents.
        file_name : str
            File name reported to the API.
        analysis_type : str
            Workflow key to run.

        Returns
        -------
        dict[str, Any]
            Response with the job ``uuid`` on success.
        """
        return self._request(
            "POST",
            "analyze",
            files={"file": (file_name, file_data)},
            data={"analysisType": analysis_type},
        )

    def get_results(self, job_id: str, poll_interval_ms: int = 0, max_attempts: int = 1) -> dict[str, Any]:
        """Get the results of an analysis job, polling until they are ready.

        Parameters
        ----------
        job_id : str
            Job UUID returned by analyze_document.
        poll_interval_ms : int
            Wait between attempts in milliseconds.
        max_attempts : int
            Maximum number of status checks.

        Returns
        -------
        dict[str, Any]
            The first response carrying ``results`` or ``error``, otherwise the
            last response received.
        """
        attempts = max(1, int(max_attempts))
        response: dict[str, Any] = {}

        for attempt in range(1, attempts + 1):
            response = self._request("GET", f"results/{quote(job_id, safe='')}")
            if response.get("results") is not None or response.get("error") is not None:
                return response

            logger.debug(
                "Job %s not ready (attempt %d/%d, status=%s)",
                job_id,
                attempt,
                attempts,
                response.get("status"),
            )
            if attempt < attempts and poll_interval_ms > 0:
                time.sleep(poll_interval_ms / 1000)

        return response


def create_client(service_account_path: str, api_base_url: str) -> VisionFiClient:
    """Default client factory used by the commands."""
    return VisionFiClient(service_account_path, api_base_url)
