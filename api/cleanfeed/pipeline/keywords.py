"""
Rule-based detection of adult-content promotion in text and identifiers.

Two independent checks live here:
- ``detect_text`` scans free text for promotional phrases, then for the
  isolated "OF" abbreviation (with a deliberately mixed case policy).
- ``detect_identifier`` applies username heuristics to an account handle.

Both are total: any string (including empty or None) yields a Verdict. The
only mutable state is the keyword set, which can be extended at runtime.
"""

import logging
import re
import threading
from typing import Iterable, List, Optional

from .verdict import (
    ABBREVIATION_CONFIDENCE,
    KEYWORD_CONFIDENCE,
    NSFW_IDENTIFIER_CONFIDENCE,
    SUSPICIOUS_IDENTIFIER_CONFIDENCE,
    Verdict,
)

logger = logging.getLogger(__name__)

# ============================================================================
# Rule Inputs and Patterns
# ============================================================================

DEFAULT_KEYWORDS = {
    "onlyfans",
    "fansly",
    "link in bio",
    "links in bio",
    "check my bio",
    "exclusive content",
    "premium content",
    "paid content",
    "ppv",
    "pay per view",
    "tip menu",
    "cashapp",
    "venmo",
    "dm for prices",
    "custom content",
    "seller",
    "selling content",
    # Link aggregators
    "linktree",
    "linktr.ee",
    "allmylinks",
    "beacons.ai",
    "onlyfans.com",
    "fansly.com",
    # Bio phrases
    "top 1%",
    "top 5%",
    "top 10%",
    "college girl",
    "barely legal",
    "barely 18",
    "just turned 18",
    "subscribe for more",
    "sub for more",
    "unlock content",
    "see more content",
    "full video",
    "explicit content",
    "naughty content",
    "dirty content",
    # Leaks
    "leaked",
    "leak",
    "leaks",
    # Messaging links
    "t.me/",
    "telegram.me/",
    "telegram",
    # Handle fragments that also show up in display names
    "sexyy",
    "xxxgirl",
    "hotgirl",
    "naughty",
    "slutty",
    "daddy",
    "babygirl",
    "kitten",
    "princess",
    "goddess",
}

# Word boundaries are ASCII-only ("ÉOF" still counts as an isolated OF);
# the gap in rule 3 accepts any Unicode whitespace.
_W = r"[A-Za-z0-9_]"

# Checked against the original text, in order. Only the first rule is
# case-sensitive: lowercase "of" is an ordinary English word.
ABBREVIATION_PATTERNS = [
    re.compile(rf"(?<!{_W})OF(?!{_W})"),
    re.compile(rf"(?<!{_W})O\.F(?!{_W})", re.IGNORECASE),
    re.compile(rf"(?<!{_W})O\s+F(?!{_W})", re.IGNORECASE),
]

# ASCII digits only.
NSFW_IDENTIFIER_PATTERNS = [
    re.compile(p, re.IGNORECASE | re.ASCII)
    for p in (
        r"xxx",
        r"sex",
        r"porn",
        r"nude",
        r"naked",
        r"onlyfans",
        r"slutty",
        r"naughty",
        r"daddy",
        r"babygirl",
        r"kitten",
        r"princess",
        r"goddess",
        r"hotgirl",
        r"sexyy",
        r"\d+(girl|babe|slut)",
        r"(18|19|20)(girl|babe)",
        r"cum",
        r"ass",
        r"tits",
        r"boobs",
    )
]

SUSPICIOUS_IDENTIFIER_TERMS = ("girl", "babe", "model")

_WHITESPACE_RE = re.compile(r"\s+")


# ============================================================================
# Helper Functions
# ============================================================================

def normalize_text(text: Optional[str]) -> str:
    """Lower-case, collapse whitespace runs and trim."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text.lower()).strip()


def _clean_keyword(keyword: str) -> str:
    # Same normalization as the text the keyword is matched against.
    return normalize_text(keyword)


# ============================================================================
# Detector
# ============================================================================

class KeywordDetector:
    """
    Phrase, abbreviation and identifier classifier.

    When several keywords occur in the same text, which one is named in the
    reason is unspecified: the keyword set is unordered and callers must not
    rely on a particular phrase being reported.

    Usage:
        detector = KeywordDetector()
        detector.detect_text("Link in bio").should_filter      # True
        detector.detect_identifier("john_doe").should_filter   # False
    """

    def __init__(self, keywords: Optional[Iterable[str]] = None):
        """
        Args:
            keywords: Extra phrases added on top of DEFAULT_KEYWORDS
        """
        self._keywords = set(DEFAULT_KEYWORDS)
        self._lock = threading.Lock()
        for keyword in keywords or []:
            self.add_custom_keyword(keyword)

    def detect_text(self, text: Optional[str]) -> Verdict:
        """
        Classify free text (post body, bio, display name).

        Phrase containment runs on the normalized text; abbreviation rules
        run on the original text so the uppercase-only "OF" rule still sees
        the caller's casing.
        """
        if not text:
            return Verdict.clean()

        normalized = normalize_text(text)
        for keyword in self._snapshot():
            if keyword in normalized:
                return Verdict.filtered(f"Contains keyword: {keyword}", KEYWORD_CONFIDENCE)

        for pattern in ABBREVIATION_PATTERNS:
            m = pattern.search(text)
            if m:
                logger.debug(f"OF abbreviation matched {pattern.pattern!r} at {m.span()}")
                return Verdict.filtered("Contains OF abbreviation", ABBREVIATION_CONFIDENCE)

        return Verdict.clean()

    def detect_identifier(self, identifier: Optional[str]) -> Verdict:
        """Classify an account handle using substring heuristics."""
        if not identifier:
            return Verdict.clean()

        lowered = identifier.lower()
        for pattern in NSFW_IDENTIFIER_PATTERNS:
            if pattern.search(lowered):
                return Verdict.filtered(
                    f"NSFW username pattern: {identifier}", NSFW_IDENTIFIER_CONFIDENCE
                )

        # Intentionally loose: "roof_babe" matches too.
        if "of" in lowered and any(term in lowered for term in SUSPICIOUS_IDENTIFIER_TERMS):
            return Verdict.filtered(
                f"Suspicious username pattern: {identifier}", SUSPICIOUS_IDENTIFIER_CONFIDENCE
            )

        return Verdict.clean()

    def add_custom_keyword(self, keyword: str) -> None:
        cleaned = _clean_keyword(keyword)
        if not cleaned:
            return
        with self._lock:
            self._keywords.add(cleaned)
        logger.info(f"Added keyword {cleaned!r}")

    def remove_custom_keyword(self, keyword: str) -> None:
        cleaned = _clean_keyword(keyword)
        with self._lock:
            removed = cleaned in self._keywords
            self._keywords.discard(cleaned)
        if removed:
            logger.info(f"Removed keyword {cleaned!r}")

    def list_keywords(self) -> List[str]:
        """Return a snapshot of the keyword set (order is not meaningful)."""
        return list(self._snapshot())

    def _snapshot(self) -> frozenset:
        with self._lock:
            return frozenset(self._keywords)

    def __len__(self) -> int:
        with self._lock:
            return len(self._keywords)
