from fastapi import APIRouter, Depends

from ..dependencies import get_filter
from ..pipeline.classify import ContentFilter
from ..schemas import CacheStatsOut

router = APIRouter()


@router.get("/stats", response_model=CacheStatsOut)
def cache_stats(content_filter: ContentFilter = Depends(get_filter)) -> CacheStatsOut:
    """
    Entry counts for the verdict cache. `size` may include expired entries
    that have not been swept yet.
    """
    stats = content_filter.cache.stats()
    return CacheStatsOut(size=stats.size, filtered=stats.filtered)


@router.delete("", response_model=CacheStatsOut)
def clear_cache(content_filter: ContentFilter = Depends(get_filter)) -> CacheStatsOut:
    content_filter.clear_cache()
    return CacheStatsOut(size=0, filtered=0)
