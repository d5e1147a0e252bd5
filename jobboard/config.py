"""Environment-driven settings for the job board.

Values come from the process environment, optionally seeded from a ``.env``
file by ``load_dotenv()`` in :mod:`jobboard.main`. ``validate_env`` fails
fast at startup so a bad ``PAGE_SIZE`` never reaches the pagination code.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Tuple

from jobboard.utils.helpers import clean_list

APP_NAME = "jobboard"

# =========================================================
# CONSTANT ENDPOINTS
# =========================================================
REMOTIVE_API = "https://remotive.com/api/remote-jobs"
ARBEITNOW_API = "https://www.arbeitnow.com/api/job-board-api"
WWR_FEEDS = (
    "https://weworkremotely.com/categories/remote-programming-jobs.rss",
    "https://weworkremotely.com/categories/remote-management-jobs.rss",
)

KNOWN_SOURCES = ("remotive", "arbeitnow", "weworkremotely")

DEFAULT_PAGE_SIZE = 10
DEFAULT_TIMEOUT = 15
DEFAULT_CACHE_TTL = 600


@dataclass(frozen=True)
class Settings:
    sources: Tuple[str, ...] = ("remotive",)
    keywords: Tuple[str, ...] = ()
    page_size: int = DEFAULT_PAGE_SIZE
    request_timeout: int = DEFAULT_TIMEOUT
    cache_ttl: int = DEFAULT_CACHE_TTL
    log_level: str = "INFO"
    remotive_url: str = REMOTIVE_API
    arbeitnow_url: str = ARBEITNOW_API
    wwr_feeds: Tuple[str, ...] = WWR_FEEDS


def _split(raw: str) -> Tuple[str, ...]:
    return tuple(clean_list(raw.split(",")))


def _positive_int(name: str, default: int, problems: list) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        problems.append(f"{name} must be an integer (got {raw!r})")
        return default
    if value <= 0:
        problems.append(f"{name} must be > 0 (got {value})")
    return value


# =========================================================
# SAFETY CHECK (fail fast)
# =========================================================
def validate_env() -> Settings:
    """Read and validate every setting, raising ``RuntimeError`` listing all problems."""
    problems: list = []

    sources = tuple(s.lower() for s in _split(os.getenv("JOBS_SOURCES", "remotive")))
    unknown = [s for s in sources if s not in KNOWN_SOURCES]
    if unknown:
        problems.append(
            f"JOBS_SOURCES has unknown source(s): {', '.join(unknown)} "
            f"(expected any of {', '.join(KNOWN_SOURCES)})"
        )
    if not sources:
        problems.append("JOBS_SOURCES must name at least one source")

    page_size = _positive_int("PAGE_SIZE", DEFAULT_PAGE_SIZE, problems)
    timeout = _positive_int("REQUEST_TIMEOUT", DEFAULT_TIMEOUT, problems)
    cache_ttl = _positive_int("CACHE_TTL_SECONDS", DEFAULT_CACHE_TTL, problems)

    if problems:
        raise RuntimeError(
            f"Invalid environment configuration: {'; '.join(problems)}"
        )

    return Settings(
        sources=sources,
        keywords=_split(os.getenv("JOBS_KEYWORDS", "")),
        page_size=page_size,
        request_timeout=timeout,
        cache_ttl=cache_ttl,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        remotive_url=os.getenv("REMOTIVE_API", REMOTIVE_API),
        arbeitnow_url=os.getenv("ARBEITNOW_API", ARBEITNOW_API),
        wwr_feeds=_split(os.getenv("WWR_FEEDS", "")) or WWR_FEEDS,
    )


def load_settings() -> Settings:
    return validate_env()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
