import logging
import math
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, List, Mapping, Optional, Set

import numpy as np

from ranking_service.models.ranking_models import RankingWeights, ScoreBreakdown, VideoScore

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 60 * 60 * 24


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_field(record: Any, name: str, alias: Optional[str] = None) -> Any:
    """Read a field from a model/object or from a plain (camelCase or snake_case) mapping"""
    if isinstance(record, Mapping):
        value = record.get(name)
        if value is None and alias:
            value = record.get(alias)
        return value
    return getattr(record, name, None)


def _number(value: Any) -> Optional[float]:
    # NaN is unusable; +/-inf is kept and handled by the callers' floors and caps
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _count_or_one(value: Any) -> float:
    # log10 needs a positive argument; missing/zero/negative counts read as 1
    number = _number(value)
    if number is None or number <= 0:
        return 1.0
    return number


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a creation timestamp into an aware UTC datetime.

    Accepts datetimes, ISO-8601 strings (a trailing "Z" included) and epoch
    milliseconds. Naive values are read as UTC. Returns None when the value
    cannot be interpreted.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class RecommendationEngine:
    """
    Blended heuristic ranking of candidate videos for one viewer.

    composite = content affinity + social proof + recency + watch time
                + device personalization + U(0, 1) * diversity_scale

    The random term is drawn fresh for every candidate on every call, so two
    calls with the same inputs are not expected to agree on the order.
    Pass a `random_source` (anything with a `random()` method returning a
    float in [0, 1)) and a `clock` to make results reproducible.
    """

    def __init__(self, weights: Optional[RankingWeights] = None,
                 random_source: Any = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.weights = weights or RankingWeights()
        self.random_source = random_source if random_source is not None else np.random.default_rng()
        self.clock = clock or utc_now

    # Content-based filtering score (category match against watch history)
    def get_content_score(self, video: Any, history_categories: Set[Any]) -> float:
        if not history_categories:
            return 0.0
        category_id = get_field(video, "category_id", "categoryId")
        return self.weights.content_match if category_id in history_categories else 0.0

    # Social proof from views and likes; capped above, not floored
    def get_collaborative_score(self, video: Any) -> float:
        w = self.weights
        views = _count_or_one(get_field(video, "views"))
        likes = _count_or_one(get_field(video, "likes"))
        view_score = math.log10(views / w.view_baseline) * w.view_weight
        like_score = math.log10(likes / w.like_baseline) * w.like_weight
        return min(view_score + like_score, w.collaborative_cap)

    def get_recency_score(self, video: Any, now: datetime) -> float:
        created_at = parse_timestamp(get_field(video, "created_at", "createdAt"))
        if created_at is None:
            return 0.0
        age_days = max((now - created_at).total_seconds() / SECONDS_PER_DAY, 0.0)
        w = self.weights
        return max(0.0, w.recency_max - (age_days / w.recency_window_days) * w.recency_max)

    def get_watch_time_score(self, video: Any) -> float:
        duration = _number(get_field(video, "duration"))
        if duration is None or duration <= 0:
            return 0.0
        return min(duration / self.weights.watch_time_divisor, self.weights.watch_time_cap)

    def get_personalized_score(self, user_preferences: Any) -> float:
        if user_preferences is None:
            return 0.0
        device = get_field(user_preferences, "preferred_device", "preferredDevice")
        return self.weights.mobile_bonus if device == self.weights.preferred_device else 0.0

    def _history_categories(self, user_history: Iterable[Any]) -> Set[Any]:
        categories = set()
        for video in user_history:
            category_id = get_field(video, "category_id", "categoryId")
            if category_id is not None:
                categories.add(category_id)
        return categories

    def score_video(self, video: Any, history_categories: Set[Any], user_preferences: Any,
                    now: datetime, random_source: Any) -> VideoScore:
        terms = {
            "content": self.get_content_score(video, history_categories),
            "collaborative": self.get_collaborative_score(video),
            "recency": self.get_recency_score(video, now),
            "watch_time": self.get_watch_time_score(video),
            "personalized": self.get_personalized_score(user_preferences),
            "diversity": float(random_source.random()) * self.weights.diversity_scale,
        }
        breakdown = ScoreBreakdown(total=sum(terms.values()), **terms)
        return VideoScore(video=video, breakdown=breakdown)

    def score_videos(self, videos: Iterable[Any], user_history: Iterable[Any] = (),
                     user_preferences: Any = None, random_source: Any = None) -> List[VideoScore]:
        """
        Score every candidate, keeping input order.

        Args:
            videos: Candidate videos (VideoRecord models or plain mappings)
            user_history: Videos the user already watched; only categories are read
            user_preferences: UserPreferences, a mapping, or None
            random_source: Overrides the engine's random source for this call

        Returns:
            One VideoScore per candidate
        """
        rng = random_source if random_source is not None else self.random_source
        history_categories = self._history_categories(user_history or ())
        # One instant per call so every candidate is aged against the same clock
        now = self.clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return [
            self.score_video(video, history_categories, user_preferences, now, rng)
            for video in videos
        ]

    def rank_with_scores(self, videos: Iterable[Any], user_history: Iterable[Any] = (),
                         user_preferences: Any = None, random_source: Any = None) -> List[VideoScore]:
        scored_videos = self.score_videos(videos, user_history, user_preferences, random_source)
        # sorted() is stable, so equal scores keep input order
        ranked = sorted(scored_videos, key=lambda sv: sv.score, reverse=True)
        logger.debug(f"Ranked {len(ranked)} videos")
        return ranked

    def rank_videos(self, videos: Iterable[Any], user_history: Iterable[Any] = (),
                    user_preferences: Any = None, random_source: Any = None) -> List[Any]:
        """Return the candidates (same objects) ordered by descending composite score"""
        return [sv.video for sv in self.rank_with_scores(videos, user_history, user_preferences, random_source)]


# Global engine instance
recommendation_engine = RecommendationEngine()


def rank_videos(videos: Iterable[Any], user_history: Iterable[Any] = (),
                user_preferences: Any = None) -> List[Any]:
    return recommendation_engine.rank_videos(videos, user_history, user_preferences)
