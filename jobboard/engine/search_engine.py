import logging
import threading

import pandas as pd

from jobboard.config import APP_NAME
from jobboard.engine.fetchers import (
    fetch_arbeitnow,
    fetch_remotive,
    fetch_weworkremotely,
)
from jobboard.utils.cache import get_from_cache, make_cache_key, set_cache

logger = logging.getLogger(APP_NAME)

_FETCH_LOCK = threading.Lock()


def _fetch_source(source, settings):
    if source == "remotive":
        return fetch_remotive(settings.remotive_url, settings.keywords, settings.request_timeout)
    if source == "arbeitnow":
        return fetch_arbeitnow(settings.arbeitnow_url, settings.keywords, settings.request_timeout)
    if source == "weworkremotely":
        return fetch_weworkremotely(settings.wwr_feeds, settings.keywords)
    raise ValueError(f"Unknown job source: {source}")


# =========================================================
# ENGINE
# =========================================================
def run_job_fetch(settings):
    """
    Fetch every configured source and return one de-duplicated list,
    newest first, ready for pagination.
    """
    all_rows = []
    for source in settings.sources:
        all_rows += _fetch_source(source, settings)

    if not all_rows:
        return []

    df = pd.DataFrame(all_rows)

    # Same posting syndicated twice
    df = df.drop_duplicates(subset=["title", "company", "url"])

    df = df.sort_values(by="_date", ascending=False, na_position="last", kind="mergesort")
    df = df.drop(columns=["_date"])

    # NaN -> None so rows serialize cleanly
    df = df.astype(object).where(pd.notna(df), None)

    rows = df.to_dict("records")
    logger.info("Loaded %d jobs from %s", len(rows), ", ".join(settings.sources))
    return rows


def get_jobs(settings):
    key = make_cache_key({
        "sources": list(settings.sources),
        "keywords": list(settings.keywords),
    })

    cached = get_from_cache(key)
    if cached is not None:
        logger.debug("Job list served from cache")
        return cached

    # one refetch at a time; waiting requests pick up its result
    with _FETCH_LOCK:
        cached = get_from_cache(key)
        if cached is not None:
            return cached

        rows = run_job_fetch(settings)
        if rows:
            set_cache(key, rows, ttl=settings.cache_ttl)
        return rows
