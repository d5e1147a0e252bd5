from __future__ import annotations

import pytest

from jobboard.utils.cache import clear_cache


def make_jobs(n: int) -> list[dict]:
    return [
        {
            "title": f"Job {i}",
            "company": f"Company {i}",
            "location": "Remote",
            "url": f"https://example.com/jobs/{i}",
            "source": "Remotive",
            "posted_date": None,
        }
        for i in range(n)
    ]


@pytest.fixture(autouse=True)
def empty_cache() -> None:
    """Every test starts with a cold job cache."""
    clear_cache()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "JOBS_SOURCES",
        "JOBS_KEYWORDS",
        "PAGE_SIZE",
        "REQUEST_TIMEOUT",
        "CACHE_TTL_SECONDS",
        "LOG_LEVEL",
        "REMOTIVE_API",
        "ARBEITNOW_API",
        "WWR_FEEDS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def jobs_factory():
    return make_jobs
