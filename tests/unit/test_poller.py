"""Unit tests for results retrieval."""

import pytest

from visionfi_cli.core.poller import (
    ANALYSIS_ERROR_MESSAGE,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_POLL_INTERVAL_MS,
    NO_JOB_MESSAGE,
    NOT_READY_MESSAGE,
    RESULTS_READY_MESSAGE,
    PollRequest,
    fetch_results,
    interpret_job_response,
)
from visionfi_cli.core.auth import NO_SERVICE_ACCOUNT_MESSAGE
from visionfi_cli.exceptions import ValidationError

from ..conftest import JOB_UUID, MemoryConfigManager


class TestPollRequest:
    """Tests for PollRequest."""

    def test_defaults(self):
        request = PollRequest(JOB_UUID)
        assert request.poll_interval_ms == DEFAULT_POLL_INTERVAL_MS
        assert request.max_attempts == DEFAULT_MAX_ATTEMPTS

    def test_single_check_without_wait(self):
        request = PollRequest(JOB_UUID, wait=False, poll_interval_ms=500, max_attempts=5)
        assert request.effective() == (0, 1)

    def test_wait_uses_given_values(self):
        request = PollRequest(JOB_UUID, wait=True, poll_interval_ms=500, max_attempts=5)
        assert request.effective() == (500, 5)

    def test_rejects_negative_interval(self):
        with pytest.raises(ValidationError):
            PollRequest(JOB_UUID, wait=True, poll_interval_ms=-1)

    def test_rejects_zero_attempts(self):
        with pytest.raises(ValidationError):
            PollRequest(JOB_UUID, wait=True, max_attempts=0)

    def test_polling_values_ignored_without_wait(self):
        request = PollRequest(JOB_UUID, poll_interval_ms=-1, max_attempts=0)
        assert request.effective() == (0, 1)


class TestInterpretJobResponse:
    """Tests for interpret_job_response."""

    def test_results_ready(self):
        result = interpret_job_response({"status": "completed", "results": {"a": 1}})

        assert result.success
        assert result.exit_code == 0
        assert result.message == RESULTS_READY_MESSAGE
        assert result.payload == {"status": "completed", "results": {"a": 1}}

    def test_analysis_error(self):
        result = interpret_job_response({"status": "failed", "error": {"code": "BAD_DOC"}})

        assert not result.success
        assert result.exit_code == 1
        assert result.message == ANALYSIS_ERROR_MESSAGE
        assert result.error == {"code": "BAD_DOC"}

    def test_still_processing_is_success(self):
        result = interpret_job_response({"status": "processing"})

        assert result.success
        assert result.exit_code == 0
        assert result.message == NOT_READY_MESSAGE
        assert result.payload == {"status": "processing"}

    def test_empty_error_is_failure(self):
        result = interpret_job_response({"status": "failed", "error": {}})

        assert not result.success
        assert result.exit_code == 1
        assert result.message == ANALYSIS_ERROR_MESSAGE
        assert result.error == {}

    def test_empty_results_are_ready(self):
        result = interpret_job_response({"status": "completed", "results": []})

        assert result.success
        assert result.message == RESULTS_READY_MESSAGE
        assert result.payload["results"] == []

    def test_null_fields_mean_still_processing(self):
        result = interpret_job_response({"status": "processing", "results": None, "error": None})
        assert result.message == NOT_READY_MESSAGE

    def test_results_take_precedence_over_error(self):
        result = interpret_job_response({"results": {"a": 1}, "error": "partial"})
        assert result.success


class TestFetchResults:
    """Tests for fetch_results."""

    def test_results_ready(self, mock_config, client_factory, fake_client, config_manager):
        result = fetch_results(PollRequest(JOB_UUID), mock_config, client_factory, config_manager)

        assert result.success
        assert result.payload["results"] == {"score": 0.98}
        assert fake_client.called("get_results") == [(JOB_UUID, 0, 1)]

    def test_wait_passes_polling_parameters(self, mock_config, client_factory, fake_client, config_manager):
        request = PollRequest(JOB_UUID, wait=True, poll_interval_ms=250, max_attempts=4)
        fetch_results(request, mock_config, client_factory, config_manager)

        assert fake_client.called("get_results") == [(JOB_UUID, 250, 4)]

    def test_empty_job_id(self, mock_config, client_factory, fake_client, config_manager):
        result = fetch_results(PollRequest(""), mock_config, client_factory, config_manager)

        assert not result.success
        assert result.message == NO_JOB_MESSAGE
        assert fake_client.called("get_results") == []
        assert len(fake_client.called("verify_auth")) == 1
        assert config_manager.saved == []

    def test_no_service_account_builds_no_client(self, mock_config, client_factory, config_manager):
        mock_config["service_account_path"] = ""

        result = fetch_results(PollRequest(JOB_UUID), mock_config, client_factory, config_manager)

        assert result.message == NO_SERVICE_ACCOUNT_MESSAGE
        client_factory.assert_not_called()

    def test_auth_failure_short_circuits(self, mock_config, client_factory, fake_client, config_manager):
        fake_client.verify_response = {"data": False}

        result = fetch_results(PollRequest(JOB_UUID), mock_config, client_factory, config_manager)

        assert result.message == "Authentication failed."
        assert fake_client.called("get_results") == []
        assert config_manager.saved == []

    def test_auth_exception(self, mock_config, client_factory, fake_client, config_manager):
        fake_client.verify_response = ConnectionError("unreachable")

        result = fetch_results(PollRequest(JOB_UUID), mock_config, client_factory, config_manager)

        assert result.message == "Authentication error: unreachable"
        assert isinstance(result.error, ConnectionError)

    def test_records_job_before_fetching(self, mock_config, client_factory, fake_client, config_manager):
        fake_client.results_response = RuntimeError("timeout")

        result = fetch_results(PollRequest(JOB_UUID), mock_config, client_factory, config_manager)

        assert result.message == "Failed to retrieve results: timeout"
        assert mock_config["recent_uuids"] == [JOB_UUID]
        assert config_manager.saved[-1]["recent_uuids"] == [JOB_UUID]

    def test_known_front_job_is_not_saved_again(self, mock_config, client_factory, config_manager):
        mock_config["recent_uuids"] = [JOB_UUID, "other"]

        fetch_results(PollRequest(JOB_UUID), mock_config, client_factory, config_manager)

        assert config_manager.saved == []

    def test_save_failure_does_not_fail_fetch(self, mock_config, client_factory):
        manager = MemoryConfigManager(fail_on_save=True)

        result = fetch_results(PollRequest(JOB_UUID), mock_config, client_factory, manager)

        assert result.success

    def test_still_processing(self, mock_config, client_factory, fake_client, config_manager):
        fake_client.results_response = {"status": "processing"}

        result = fetch_results(PollRequest(JOB_UUID), mock_config, client_factory, config_manager)

        assert result.success
        assert result.exit_code == 0
        assert result.message == NOT_READY_MESSAGE
