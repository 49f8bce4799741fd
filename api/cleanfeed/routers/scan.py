from fastapi import APIRouter, Depends

from ..dependencies import get_filter
from ..pipeline.classify import ContentFilter
from ..pipeline.verdict import Verdict
from ..schemas import IdentifierIn, ScanIn, ScanOut, TextIn, VerdictOut

router = APIRouter()


def _verdict_out(verdict: Verdict) -> VerdictOut:
    return VerdictOut(
        should_filter=verdict.should_filter,
        reason=verdict.reason,
        confidence=verdict.confidence,
    )


@router.post("", response_model=ScanOut)
def scan(payload: ScanIn, content_filter: ContentFilter = Depends(get_filter)) -> ScanOut:
    """
    Classify one observed content item.

    Steps (first decisive one wins):
    - filtering disabled in settings -> clean
    - identifier on the whitelist -> clean
    - cached verdict for the identifier (24h TTL)
    - identifier heuristics (NSFW handle patterns)
    - text heuristics (promotional phrases, isolated "OF" abbreviation)

    Returns:
    - `should_filter`, `reason`, `confidence`: the verdict
    - `source`: disabled | whitelist | cache | identifier | text
    - `filter_mode`, `strictness`: current settings, for the presentation layer

    Example request:
    ```json
    {"identifier": "someone", "text": "Link in bio"}
    ```
    """
    return content_filter.classify_item(payload.identifier, payload.text).to_out()


@router.post("/text", response_model=VerdictOut)
def scan_text(payload: TextIn, content_filter: ContentFilter = Depends(get_filter)) -> VerdictOut:
    """Run text detection only; bypasses settings and cache."""
    return _verdict_out(content_filter.detector.detect_text(payload.text))


@router.post("/identifier", response_model=VerdictOut)
def scan_identifier(payload: IdentifierIn, content_filter: ContentFilter = Depends(get_filter)) -> VerdictOut:
    """Run identifier heuristics only; bypasses settings and cache."""
    return _verdict_out(content_filter.detector.detect_identifier(payload.identifier))
