import logging

import feedparser
import requests

from jobboard.config import APP_NAME
from jobboard.utils.helpers import keyword_match, normalize_date, safe_url

logger = logging.getLogger(APP_NAME)


def _row(source, title, company, location, url, dt):
    return {
        "title": title,
        "company": company or None,
        "location": location or None,
        "url": safe_url(url),
        "source": source,
        "posted_date": dt.isoformat() if dt else None,
        "_date": dt,  # internal only (for sorting)
    }


def _get_json(url, timeout, source):
    try:
        r = requests.get(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.warning("%s request failed: %s", source, e)
        return None

    if r.status_code != 200:
        logger.warning("%s returned HTTP %s", source, r.status_code)
        return None

    try:
        return r.json()
    except ValueError:
        logger.warning("%s returned a body that is not JSON", source)
        return None


# =========================================================
# JSON APIS
# =========================================================
def fetch_remotive(url, keywords=(), timeout=15):
    rows = []
    payload = _get_json(url, timeout, "Remotive")
    if not payload:
        return rows

    for j in payload.get("jobs", []):
        title = j.get("title")
        if not title or not keyword_match(title, keywords):
            continue

        rows.append(_row(
            "Remotive",
            title,
            j.get("company_name"),
            j.get("candidate_required_location") or "Remote",
            j.get("url"),
            normalize_date(j.get("publication_date", "")),
        ))

    logger.info("Remotive: %d jobs", len(rows))
    return rows


def fetch_arbeitnow(url, keywords=(), timeout=15):
    rows = []
    payload = _get_json(url, timeout, "Arbeitnow")
    if not payload:
        return rows

    for j in payload.get("data", []):
        title = j.get("title")
        if not title or not keyword_match(title, keywords):
            continue

        location = j.get("location")
        if j.get("remote") and not location:
            location = "Remote"

        rows.append(_row(
            "Arbeitnow",
            title,
            j.get("company_name"),
            location,
            j.get("url"),
            normalize_date(j.get("created_at")),
        ))

    logger.info("Arbeitnow: %d jobs", len(rows))
    return rows


# =========================================================
# RSS FEEDS
# =========================================================
def fetch_weworkremotely(feeds, keywords=()):
    rows = []

    for feed_url in feeds:
        feed = feedparser.parse(feed_url)
        if feed.get("bozo") and not feed.entries:
            logger.warning("WeWorkRemotely feed %s unreadable: %s", feed_url, feed.get("bozo_exception"))
            continue

        for e in feed.entries:
            raw_title = e.get("title", "")
            # entries are titled "Company: Job title"
            company, sep, title = raw_title.partition(": ")
            if not sep:
                company, title = "", raw_title
            if not title or not keyword_match(title, keywords):
                continue

            rows.append(_row(
                "WeWorkRemotely",
                title,
                company,
                e.get("region") or "Remote",
                e.get("link"),
                normalize_date(e.get("published_parsed")),
            ))

    logger.info("WeWorkRemotely: %d jobs", len(rows))
    return rows
