"""Unit tests for the recent-jobs list."""

from visionfi_cli.core.recent_jobs import MAX_RECENT_JOBS, remember_job


def test_new_job_goes_first():
    assert remember_job(["b", "a"], "c") == ["c", "b", "a"]


def test_existing_job_moves_to_front_without_duplicates():
    assert remember_job(["c", "b", "a"], "a") == ["a", "c", "b"]


def test_list_is_bounded():
    recent = [f"job-{i}" for i in range(MAX_RECENT_JOBS)]
    updated = remember_job(recent, "new")

    assert len(updated) == MAX_RECENT_JOBS
    assert updated[0] == "new"
    assert "job-9" not in updated


def test_empty_job_leaves_list_unchanged():
    assert remember_job(["a"], "") == ["a"]


def test_input_is_not_modified():
    recent = ["a", "b"]
    remember_job(recent, "b")
    assert recent == ["a", "b"]


def test_custom_limit():
    assert remember_job(["a", "b"], "c", limit=2) == ["c", "a"]
