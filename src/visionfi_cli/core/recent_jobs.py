"""Bounded most-recent-first list of job UUIDs."""

MAX_RECENT_JOBS = 10


def remember_job(recent: list[str], job_id: str, limit: int = MAX_RECENT_JOBS) -> list[str]:
    """
    Record a job at the front of the recent-jobs list.

    Parameters
    ----------
    recent : list[str]
        Current list, most recent first. Not modified.
    job_id : str
        Job UUID to record. Empty ids leave the list unchanged.
    limit : int, optional
        Maximum list length, by default 10.

    Returns
    -------
    list[str]
        New list with ``job_id`` first, any earlier occurrence removed and
        the oldest entries dropped beyond ``limit``.

    Examples
    --------
    >>> remember_job(["b", "a"], "a")
    ['a', 'b']
    """
    if not job_id:
        return list(recent)
    return [job_id, *(u for u in recent if u != job_id)][:limit]
