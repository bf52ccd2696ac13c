"""Pytest configuration and shared fixtures."""

import copy
import logging
from unittest.mock import Mock

import pytest

from visionfi_cli.config.loader import default_config
from visionfi_cli.lib import output

JOB_UUID = "123e4567-e89b-12d3-a456-426614174000"

WORKFLOWS_RESPONSE = {
    "success": True,
    "data": [
        {"workflow_key": "auto_loan_abstract", "description": "Auto loan document abstraction"},
        {"workflow_key": "bank_statement", "description": None},
    ],
}


class FakeClient:
    """In-memory API client recording every call.

    Each ``*_response`` attribute is returned by the matching method; set
    it to an exception instance to make the method raise instead.
    """

    def __init__(self):
        self.calls = []
        self.verify_response = {"data": True}
        self.client_info_response = {"success": True, "data": {"name": "Test Client", "tier": "pro"}}
        self.workflows_response = copy.deepcopy(WORKFLOWS_RESPONSE)
        self.analyze_response = {"uuid": JOB_UUID}
        self.results_response = {"status": "completed", "results": {"score": 0.98}}

    def _reply(self, name, response, *args):
        self.calls.append((name, args))
        if isinstance(response, BaseException):
            raise response
        return response

    def verify_auth(self):
        return self._reply("verify_auth", self.verify_response)

    def get_client_info(self):
        return self._reply("get_client_info", self.client_info_response)

    def get_workflows(self):
        return self._reply("get_workflows", self.workflows_response)

    def analyze_document(self, file_data, file_name, analysis_type):
        return self._reply("analyze_document", self.analyze_response, file_data, file_name, analysis_type)

    def get_results(self, job_id, poll_interval_ms=0, max_attempts=1):
        return self._reply("get_results", self.results_response, job_id, poll_interval_ms, max_attempts)

    def called(self, name):
        return [args for call, args in self.calls if call == name]


class MemoryConfigManager:
    """Config store keeping saved snapshots in memory."""

    def __init__(self, initial=None, fail_on_save=False):
        self.initial = initial or default_config()
        self.saved = []
        self.fail_on_save = fail_on_save

    def load(self):
        return copy.deepcopy(self.saved[-1] if self.saved else self.initial)

    def save(self, config):
        if self.fail_on_save:
            raise OSError("disk full")
        self.saved.append(copy.deepcopy(config))


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a temporary directory and disable colors."""
    config_home = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    for name in (
        "VISIONFI_SERVICE_ACCOUNT_PATH",
        "VISIONFI_API_ENDPOINT",
        "VISIONFI_WORKFLOW_CACHE_TTL",
        "VISIONFI_LOG_FORMAT",
        "VISIONFI_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    output.set_color_enabled(False)
    yield config_home
    logger = logging.getLogger("visionfi_cli")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def client_factory(fake_client):
    """Factory returning ``fake_client`` and recording its arguments."""
    return Mock(return_value=fake_client)


@pytest.fixture
def config_manager():
    return MemoryConfigManager()


@pytest.fixture
def service_account_file(tmp_path):
    """Placeholder service account key on disk."""
    path = tmp_path / "service_account.json"
    path.write_text('{"type": "service_account"}')
    return path


@pytest.fixture
def mock_config(service_account_file):
    """Standard test configuration with a service account configured.

    Returns
    -------
    dict
        Test configuration dictionary.
    """
    config = default_config()
    config["service_account_path"] = str(service_account_file)
    config["api_endpoint"] = "https://api.test.visionfi.ai/v1"
    return config


@pytest.fixture
def document_file(tmp_path):
    path = tmp_path / "loan.pdf"
    path.write_bytes(b"%PDF-1.4 test document")
    return path


@pytest.fixture
def make_ctx(mock_config, config_manager, client_factory):
    """Build a command context dictionary around parsed-argument stand-ins."""

    def _make_ctx(args, **overrides):
        ctx = {
            "config": mock_config,
            "config_manager": config_manager,
            "client_factory": client_factory,
            "verbose": False,
            "json_output": False,
            "args": args,
        }
        ctx.update(overrides)
        return ctx

    return _make_ctx
