from typing import Optional
import logging

from ranking_service.models.pipeline_models import RankingState
from ranking_service.services.ranking_engine import RecommendationEngine, recommendation_engine

logger = logging.getLogger(__name__)

def rank_videos_node(state: RankingState, engine: Optional[RecommendationEngine] = None) -> RankingState:
    """
    LangGraph node scoring the prepared candidates against the user's
    watch history and preferences
    """
    try:
        state["pipeline_step"] = "ranking"
        engine = engine or recommendation_engine

        candidates = state.get("prepared_candidates") or []
        if not candidates:
            logger.warning("No candidate videos to rank")
            state["ranked_videos"] = []
            state["pipeline_step"] = "ranking_completed"
            return state

        ranked_videos = engine.rank_videos(
            candidates,
            user_history=state.get("history") or [],
            user_preferences=state.get("preferences"),
        )

        state["ranked_videos"] = ranked_videos
        state["pipeline_step"] = "ranking_completed"

        logger.info(f"Ranking completed: {len(ranked_videos)} videos, "
                    f"history={len(state.get('history') or [])}, "
                    f"preferences={'yes' if state.get('preferences') is not None else 'no'}")
        return state

    except Exception as e:
        logger.error(f"Error in rank_videos_node: {str(e)}")
        state["error"] = f"Ranking failed: {str(e)}"
        state["pipeline_step"] = "error"
        return state
