import threading
from typing import Optional

from . import config
from .pipeline.cache import VerdictCache
from .pipeline.classify import ContentFilter

_filter: Optional[ContentFilter] = None
_lock = threading.Lock()


def get_filter() -> ContentFilter:
    """Process-wide ContentFilter, built on first use from config."""
    global _filter
    with _lock:
        if _filter is None:
            cache = VerdictCache(
                ttl_ms=int(config.CACHE_TTL_HOURS * 60 * 60 * 1000),
                max_entries=config.CACHE_MAX_ENTRIES,
            )
            _filter = ContentFilter(cache=cache, settings=config.load_settings())
        return _filter


def reset_filter() -> None:
    """Drop the shared filter so the next request rebuilds it."""
    global _filter
    with _lock:
        _filter = None
