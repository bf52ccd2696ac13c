"""Unit tests for Session."""

from visionfi_cli.core.session import Session

from ..conftest import JOB_UUID


def make_session(config, manager, factory):
    return Session(config, manager, factory)


def test_cache_ttl_from_config(mock_config, config_manager, client_factory):
    mock_config["workflow_cache_ttl"] = 30
    session = make_session(mock_config, config_manager, client_factory)
    assert session.workflow_cache.ttl_seconds == 30


def test_initialize_client_uses_configured_path(mock_config, config_manager, client_factory, fake_client):
    session = make_session(mock_config, config_manager, client_factory)

    result = session.initialize_client()

    assert result.success
    assert session.client is fake_client
    client_factory.assert_called_once_with(mock_config["service_account_path"], mock_config["api_endpoint"])


def test_initialize_client_without_path(mock_config, config_manager, client_factory):
    mock_config["service_account_path"] = ""
    session = make_session(mock_config, config_manager, client_factory)

    result = session.initialize_client()

    assert not result.success
    assert session.client is None


def test_remember_job_persists_only_changes(mock_config, config_manager, client_factory):
    session = make_session(mock_config, config_manager, client_factory)

    session.remember_job(JOB_UUID)
    session.remember_job(JOB_UUID)

    assert session.recent_jobs == [JOB_UUID]
    assert len(config_manager.saved) == 1


def test_get_workflows_goes_through_cache(mock_config, config_manager, client_factory, fake_client):
    session = make_session(mock_config, config_manager, client_factory)
    session.initialize_client()

    session.get_workflows()
    result = session.get_workflows()

    assert result.payload["from_cache"] is True
    assert len(fake_client.called("get_workflows")) == 1


def test_debug_flag(mock_config, config_manager, client_factory):
    mock_config["debug_mode"] = True
    assert make_session(mock_config, config_manager, client_factory).debug is True
