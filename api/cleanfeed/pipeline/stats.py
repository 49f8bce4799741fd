"""Daily filter counters kept in memory."""

import logging
import threading
from dataclasses import dataclass
from datetime import date
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class StatsSnapshot:
    filtered_today: int
    cached_users: int
    last_reset: str


class FilterStats:
    """
    ``filtered_today`` resets whenever the calendar day differs from the day
    of the last reset. The check runs on every access, so no timer is needed.
    """

    def __init__(self, today: Callable[[], date] = date.today):
        self._today = today
        self._lock = threading.Lock()
        self.filtered_today = 0
        self.cached_users = 0
        self.last_reset = today()

    def increment_filtered(self) -> None:
        with self._lock:
            self._maybe_reset()
            self.filtered_today += 1

    def update_cached_users(self, count: int) -> None:
        with self._lock:
            self._maybe_reset()
            self.cached_users = max(0, int(count))

    def snapshot(self) -> StatsSnapshot:
        with self._lock:
            self._maybe_reset()
            return StatsSnapshot(
                filtered_today=self.filtered_today,
                cached_users=self.cached_users,
                last_reset=self.last_reset.isoformat(),
            )

    def _maybe_reset(self) -> None:
        today = self._today()
        if today != self.last_reset:
            logger.info(f"Daily reset: {self.filtered_today} items filtered on {self.last_reset}")
            self.filtered_today = 0
            self.last_reset = today
