import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .schemas import FilterSettings

logger = logging.getLogger(__name__)

SETTINGS_FILE = os.getenv("CLEANFEED_SETTINGS_FILE", "").strip()
LOG_LEVEL = os.getenv("CLEANFEED_LOG_LEVEL", "INFO").upper()
CACHE_TTL_HOURS = float(os.getenv("CLEANFEED_CACHE_TTL_HOURS", "24"))
CACHE_MAX_ENTRIES = int(os.getenv("CLEANFEED_CACHE_MAX_ENTRIES", "1000"))


def load_settings(path: Optional[str] = None) -> FilterSettings:
    """
    Load FilterSettings from the JSON settings store.

    Falls back to defaults when no path is configured or the file cannot be
    read or validated; classification must never depend on the store.
    """
    path = path if path is not None else SETTINGS_FILE
    if not path:
        return FilterSettings()
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        settings = FilterSettings.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.warning(f"Failed to load settings from {path}: {e}; using defaults")
        return FilterSettings()
    logger.info(f"Loaded settings from {path} ({len(settings.keywords)} custom keywords)")
    return settings
