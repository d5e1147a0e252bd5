"""Process-wide TTL cache for fetched job lists.

Route handlers run in FastAPI's threadpool, so every access to ``_CACHE``
goes through ``_LOCK``.
"""
import hashlib
import json
import threading
import time

_CACHE = {}
_LOCK = threading.Lock()
_DEFAULT_TTL = 600   # 10 minutes


def _now():
    return time.time()


def make_cache_key(payload: dict) -> str:
    return hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()


def get_from_cache(key: str):
    with _LOCK:
        entry = _CACHE.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if _now() > expires_at:
            _CACHE.pop(key, None)
            return None
        return value


def set_cache(key: str, value, ttl=None):
    expires_at = _now() + (_DEFAULT_TTL if ttl is None else ttl)
    with _LOCK:
        _CACHE[key] = (value, expires_at)


def clear_cache():
    with _LOCK:
        _CACHE.clear()
