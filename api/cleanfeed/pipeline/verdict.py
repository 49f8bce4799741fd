"""
Shared verdict model for the keyword detector and the verdict cache.

A verdict is immutable: re-classification produces a new instance rather
than mutating the old one.
"""

from dataclasses import dataclass
from typing import Optional

# Fixed confidence tiers per rule family.
KEYWORD_CONFIDENCE = 0.9
ABBREVIATION_CONFIDENCE = 0.85
NSFW_IDENTIFIER_CONFIDENCE = 0.95
SUSPICIOUS_IDENTIFIER_CONFIDENCE = 0.8


@dataclass(frozen=True)
class Verdict:
    should_filter: bool
    reason: Optional[str] = None
    confidence: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence out of range: {self.confidence}")
        if self.should_filter != (self.confidence > 0):
            raise ValueError("confidence must be 0 exactly when should_filter is False")
        if self.should_filter != (self.reason is not None):
            raise ValueError("reason must be present exactly when should_filter is True")

    @classmethod
    def clean(cls) -> "Verdict":
        return cls(should_filter=False)

    @classmethod
    def filtered(cls, reason: str, confidence: float) -> "Verdict":
        return cls(should_filter=True, reason=reason, confidence=confidence)
