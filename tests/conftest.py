from datetime import datetime, timedelta, timezone

import pytest

from ranking_service.models.video_models import VideoRecord
from ranking_service.services.ranking_engine import RecommendationEngine

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class FixedRandom:
    """Random source that always returns the same draw and counts calls."""

    def __init__(self, value: float = 0.0):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def fixed_random():
    return FixedRandom(0.0)


@pytest.fixture
def engine(fixed_random):
    return RecommendationEngine(random_source=fixed_random, clock=lambda: NOW)


@pytest.fixture
def make_video():
    def _make_video(video_id, days_old=None, **fields):
        if days_old is not None:
            fields["createdAt"] = (NOW - timedelta(days=days_old)).isoformat()
        return VideoRecord(id=video_id, **fields)
    return _make_video


@pytest.fixture
def make_random():
    return FixedRandom
