"""
Recommendation service that interfaces with the ranking orchestrator
"""
from typing import Any, Dict, List

from ranking_service.models.ranking_models import VideoScore
from ranking_service.models.request_models import RankRequest, RelatedVideosRequest
from ranking_service.pipelines.orchestrator import ranking_orchestrator
from ranking_service.pipelines.prepare_candidates_node import filter_candidates
from ranking_service.services.ranking_engine import recommendation_engine

def rank_candidates(request: RankRequest) -> Dict[str, Any]:
    """
    Rank the request's candidates for the user described by its history and preferences

    Args:
        request: Candidates, watch history, preferences and optional top_k / category

    Returns:
        Dictionary containing the ordered videos and pipeline metadata
    """
    return ranking_orchestrator.rank(
        candidates=request.candidates,
        history=request.history,
        preferences=request.preferences,
        top_k=request.top_k,
        category_id=request.category_id,
    )

def get_related_videos(request: RelatedVideosRequest) -> Dict[str, Any]:
    """
    Rank candidates for the "up next" list, leaving out the video being watched
    """
    return ranking_orchestrator.rank(
        candidates=request.candidates,
        history=request.history,
        preferences=request.preferences,
        top_k=request.top_k,
        exclude_video_id=request.current_video_id,
        category_id=request.category_id,
    )

def explain_ranking(request: RankRequest) -> List[VideoScore]:
    """Ranked candidates together with each one's per-term score breakdown"""
    candidates = filter_candidates(request.candidates, category_id=request.category_id)
    scores = recommendation_engine.rank_with_scores(
        candidates,
        user_history=request.history,
        user_preferences=request.preferences,
    )
    return scores[:request.top_k] if request.top_k is not None else scores
