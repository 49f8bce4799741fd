import sys
from pathlib import Path

import pytest


# Ensure the `api/` directory is on sys.path so tests can import `cleanfeed.*`
CURRENT_FILE = Path(__file__).resolve()
API_DIR = CURRENT_FILE.parents[1]  # .../api
if str(API_DIR) not in sys.path:
    sys.path.insert(0, str(API_DIR))


HOUR_MS = 60 * 60 * 1000


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance_hours(self, hours: float) -> None:
        self.now += int(hours * HOUR_MS)


@pytest.fixture
def clock():
    return FakeClock()
