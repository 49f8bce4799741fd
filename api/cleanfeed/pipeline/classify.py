"""
Content filter orchestration.

This module wires the keyword detector to the verdict cache. For each observed
item it checks, in order: whether filtering is enabled, the whitelist, the
cache, the identifier heuristics, and finally the text. Verdicts for items
with an identifier are written back to the cache so repeated sightings of the
same account skip classification.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..schemas import FilterSettings, ScanOut
from .cache import VerdictCache
from .keywords import KeywordDetector
from .stats import FilterStats
from .verdict import Verdict

logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    identifier: Optional[str]
    verdict: Verdict
    source: str
    filter_mode: str
    strictness: str

    def to_out(self) -> ScanOut:
        return ScanOut(
            identifier=self.identifier,
            should_filter=self.verdict.should_filter,
            reason=self.verdict.reason,
            confidence=self.verdict.confidence,
            source=self.source,
            filter_mode=self.filter_mode,
            strictness=self.strictness,
        )


# ============================================================================
# Public API
# ============================================================================

class ContentFilter:
    def __init__(
        self,
        detector: Optional[KeywordDetector] = None,
        cache: Optional[VerdictCache] = None,
        settings: Optional[FilterSettings] = None,
        stats: Optional[FilterStats] = None,
    ):
        self.detector = detector if detector is not None else KeywordDetector()
        self.cache = cache if cache is not None else VerdictCache()
        self.stats = stats or FilterStats()
        self.settings = FilterSettings()
        self.update_settings(settings or FilterSettings())

    def update_settings(self, settings: FilterSettings) -> None:
        """Replace settings; custom keywords are added, never removed."""
        self.settings = settings
        for keyword in settings.keywords:
            self.detector.add_custom_keyword(keyword)

    def classify_item(self, identifier: Optional[str], text: Optional[str]) -> FilterResult:
        """
        Classify one observed item.

        Identifier verdicts take precedence over text verdicts. Only a
        filtered identifier verdict short-circuits the text check.
        """
        identifier = identifier or None

        if not self.settings.enabled:
            return self._result(identifier, Verdict.clean(), "disabled")

        if identifier and identifier in self.settings.whitelist:
            return self._result(identifier, Verdict.clean(), "whitelist")

        if identifier:
            cached = self.cache.get(identifier)
            if cached is not None:
                return self._result(identifier, cached, "cache")

            verdict = self.detector.detect_identifier(identifier)
            if verdict.should_filter:
                self._remember(identifier, verdict)
                return self._result(identifier, verdict, "identifier")

        verdict = self.detector.detect_text(text)
        logger.debug(
            f"Checked identifier={identifier!r} text={(text or '')[:100]!r} "
            f"should_filter={verdict.should_filter} reason={verdict.reason!r}"
        )
        if identifier:
            self._remember(identifier, verdict)
        return self._result(identifier, verdict, "text")

    def clear_cache(self) -> None:
        self.cache.clear()
        self.stats.update_cached_users(0)

    def _remember(self, identifier: str, verdict: Verdict) -> None:
        self.cache.set(identifier, verdict)
        self.stats.update_cached_users(len(self.cache))

    def _result(self, identifier: Optional[str], verdict: Verdict, source: str) -> FilterResult:
        if verdict.should_filter:
            self.stats.increment_filtered()
        return FilterResult(
            identifier=identifier,
            verdict=verdict,
            source=source,
            filter_mode=self.settings.filter_mode,
            strictness=self.settings.strictness,
        )
