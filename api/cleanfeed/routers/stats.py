from fastapi import APIRouter, Depends

from ..dependencies import get_filter
from ..pipeline.classify import ContentFilter
from ..schemas import FilterStatsOut

router = APIRouter()


@router.get("", response_model=FilterStatsOut)
def filter_stats(content_filter: ContentFilter = Depends(get_filter)) -> FilterStatsOut:
    """Items filtered today and current cache population."""
    snap = content_filter.stats.snapshot()
    return FilterStatsOut(
        filtered_today=snap.filtered_today,
        cached_users=snap.cached_users,
        last_reset=snap.last_reset,
    )
