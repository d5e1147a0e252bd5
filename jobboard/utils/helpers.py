import time
from datetime import datetime, timezone


def normalize_date(val):
    if val is None or val == "":
        return None
    if isinstance(val, time.struct_time):
        return datetime(*val[:6])
    if isinstance(val, (int, float)) and not isinstance(val, bool):
        try:
            return datetime.fromtimestamp(val, tz=timezone.utc).replace(tzinfo=None)
        except (OverflowError, OSError, ValueError):
            return None
    try:
        dt = datetime.fromisoformat(str(val).replace("Z", "").replace(".000", ""))
    except ValueError:
        return None
    # keep everything naive UTC so rows from different sources sort together
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def keyword_match(text, keywords):
    if not keywords:
        return True
    t = (text or "").lower()
    return any(k.lower() in t for k in keywords)


def clean_list(values):
    return [v.strip() for v in values if v and v.strip()]


def safe_url(url):
    """Return ``url`` when it is an absolute http(s) link, else ""."""
    u = (url or "").strip()
    return u if u.lower().startswith(("http://", "https://")) else ""
