from typing import TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from ranking_service.models.pipeline_models import RankingState

logger = logging.getLogger(__name__)

def limit_results_node(state: 'RankingState') -> 'RankingState':
    """
    Keep the first top_k ranked videos (all of them when top_k is not set)
    """
    try:
        ranked_videos = state.get("ranked_videos") or []
        top_k = state.get("top_k")

        state["final_list"] = ranked_videos[:top_k] if top_k is not None else list(ranked_videos)
        state["pipeline_step"] = "completed"

        logger.info(f"Returning {len(state['final_list'])} of {len(ranked_videos)} ranked videos")
        return state

    except Exception as e:
        logger.error(f"Error in limit_results_node: {str(e)}")
        state["error"] = str(e)
        state["pipeline_step"] = "error"
        return state
