from fastapi import APIRouter, Depends

from ..dependencies import get_filter
from ..pipeline.classify import ContentFilter

router = APIRouter()


@router.get("")
def health(content_filter: ContentFilter = Depends(get_filter)):
    """Return API status with keyword and cache counts."""
    return {
        "status": "ok",
        "keywords": len(content_filter.detector),
        "cached": len(content_filter.cache),
    }
