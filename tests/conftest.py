"""
Shared fixtures for scoreboard tests
"""
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add src to path
_src = Path(__file__).resolve().parent.parent / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from scoreboard import ScoreBoard


class FakeClock:
    """Clock that moves forward one second per call unless frozen"""

    def __init__(self, start: datetime = datetime(2024, 6, 14, 18, 0, 0)):
        self.now = start
        self.step = timedelta(seconds=1)

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current

    def freeze(self):
        self.step = timedelta(0)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scoreboard(clock):
    return ScoreBoard(clock=clock)
