from typing import Any, Iterable, List, Optional, TYPE_CHECKING, Union
import logging

from ranking_service.services.ranking_engine import get_field

if TYPE_CHECKING:
    from ranking_service.models.pipeline_models import RankingState

logger = logging.getLogger(__name__)

def filter_candidates(candidates: Iterable[Any],
                      exclude_video_id: Optional[Union[int, str]] = None,
                      category_id: Optional[Union[int, str]] = None) -> List[Any]:
    """
    Drop the video being watched and, when a category is selected,
    everything outside that category
    """
    candidates = list(candidates or [])

    if exclude_video_id is not None:
        candidates = [video for video in candidates if get_field(video, "id") != exclude_video_id]

    if category_id is not None:
        candidates = [
            video for video in candidates
            if get_field(video, "category_id", "categoryId") == category_id
        ]

    return candidates

def prepare_candidates_node(state: 'RankingState') -> 'RankingState':
    """
    LangGraph node applying filter_candidates to the request's candidates
    """
    try:
        state["pipeline_step"] = "preparing_candidates"

        candidates = filter_candidates(
            state.get("candidates"),
            exclude_video_id=state.get("exclude_video_id"),
            category_id=state.get("category_id"),
        )

        state["prepared_candidates"] = candidates
        state["pipeline_step"] = "candidates_prepared"

        logger.info(f"Prepared {len(candidates)} of {len(state.get('candidates') or [])} candidates")
        return state

    except Exception as e:
        logger.error(f"Error in prepare_candidates_node: {str(e)}")
        state["error"] = str(e)
        state["pipeline_step"] = "error"
        return state
