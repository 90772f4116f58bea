from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> List[str]:
    """Load a captured xcodebuild log as a list of lines."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8").splitlines()


class IncrementingClock:
    """Returns a time `interval` seconds later on every call."""

    def __init__(self, interval: float = 5.0):
        self.interval = interval
        self.calls = 0
        self._start = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        now = self._start + timedelta(seconds=self.interval * self.calls)
        self.calls += 1
        return now

