from fastapi import APIRouter, Depends

from ..dependencies import get_filter
from ..pipeline.classify import ContentFilter
from ..schemas import FilterSettings

router = APIRouter()


@router.get("", response_model=FilterSettings)
def read_settings(content_filter: ContentFilter = Depends(get_filter)) -> FilterSettings:
    return content_filter.settings


@router.put("", response_model=FilterSettings)
def replace_settings(payload: FilterSettings, content_filter: ContentFilter = Depends(get_filter)) -> FilterSettings:
    """
    Replace settings. Keywords listed here are added to the keyword set;
    use DELETE /keywords/{keyword} to remove one.
    """
    content_filter.update_settings(payload)
    return content_filter.settings
