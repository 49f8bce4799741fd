from fastapi import APIRouter, Depends

from ..dependencies import get_filter
from ..pipeline.classify import ContentFilter
from ..schemas import KeywordIn, KeywordsOut

router = APIRouter()


def _keywords_out(content_filter: ContentFilter) -> KeywordsOut:
    # Sorted for display only; the set itself is unordered.
    keywords = sorted(content_filter.detector.list_keywords())
    return KeywordsOut(keywords=keywords, count=len(keywords))


@router.get("", response_model=KeywordsOut)
def list_keywords(content_filter: ContentFilter = Depends(get_filter)) -> KeywordsOut:
    return _keywords_out(content_filter)


@router.post("", response_model=KeywordsOut)
def add_keyword(payload: KeywordIn, content_filter: ContentFilter = Depends(get_filter)) -> KeywordsOut:
    """Add a custom phrase (stored lower-cased)."""
    content_filter.detector.add_custom_keyword(payload.keyword)
    return _keywords_out(content_filter)


@router.delete("/{keyword}", response_model=KeywordsOut)
def remove_keyword(keyword: str, content_filter: ContentFilter = Depends(get_filter)) -> KeywordsOut:
    """Remove a phrase; unknown phrases are ignored."""
    content_filter.detector.remove_custom_keyword(keyword)
    return _keywords_out(content_filter)
