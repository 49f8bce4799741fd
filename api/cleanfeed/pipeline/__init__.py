from .cache import CacheStats, VerdictCache
from .classify import ContentFilter, FilterResult
from .keywords import KeywordDetector
from .verdict import Verdict

__all__ = [
    "CacheStats",
    "ContentFilter",
    "FilterResult",
    "KeywordDetector",
    "Verdict",
    "VerdictCache",
]
