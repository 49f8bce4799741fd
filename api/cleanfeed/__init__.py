"""
CleanFeed: rule-based filtering of adult-content promotion in social feeds.

Components:
- pipeline/keywords.py: phrase, abbreviation and identifier rules
- pipeline/cache.py: per-identifier verdict cache (TTL + size ceiling)
- pipeline/classify.py: whitelist -> cache -> identifier -> text orchestration
- routers/: FastAPI endpoints over the shared content filter
"""

__version__ = "0.1.0"
