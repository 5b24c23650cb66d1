# Models for ranking weights and per-video score breakdowns
from pydantic import BaseModel, ConfigDict, Field
from typing import Any


class RankingWeights(BaseModel):
    """Configuration for the blended ranking score"""
    # Content affinity: candidate category seen in watch history
    content_match: float = 0.3

    # Social proof: log10(count / baseline) * weight, summed and capped
    view_weight: float = 0.2
    like_weight: float = 0.2
    view_baseline: float = Field(default=100.0, gt=0)
    like_baseline: float = Field(default=10.0, gt=0)
    collaborative_cap: float = 0.3

    # Recency: linear decay from recency_max to 0 over the window
    recency_max: float = 0.2
    recency_window_days: float = Field(default=30.0, gt=0)

    # Watch time: duration / divisor, capped
    watch_time_divisor: float = Field(default=600.0, gt=0)
    watch_time_cap: float = 0.1

    # Personalization
    mobile_bonus: float = 0.05
    preferred_device: str = "mobile"

    # Random term, U(0, 1) * scale
    diversity_scale: float = 0.1


class ScoreBreakdown(BaseModel):
    """Per-term contributions to one composite score"""
    content: float = 0.0
    collaborative: float = 0.0
    recency: float = 0.0
    watch_time: float = 0.0
    personalized: float = 0.0
    diversity: float = 0.0
    total: float = 0.0


class VideoScore(BaseModel):
    """A candidate paired with its score for the duration of one ranking call"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    video: Any
    breakdown: ScoreBreakdown

    @property
    def score(self) -> float:
        return self.breakdown.total
