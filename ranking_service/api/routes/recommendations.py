from fastapi import APIRouter, HTTPException
import logging

from ranking_service.models.request_models import RankRequest, RelatedVideosRequest
from ranking_service.models.response_models import ExplainResponse, RankResponse, ScoredVideo
from ranking_service.services.recommendation_service import (
    explain_ranking,
    get_related_videos,
    rank_candidates,
)

logger = logging.getLogger(__name__)

router = APIRouter()

def _to_response(result: dict) -> RankResponse:
    if result.get("error"):
        logger.error(f"Ranking pipeline failed: {result['error']}")
        raise HTTPException(status_code=500, detail=f"Ranking failed: {result['error']}")
    return RankResponse(videos=result["videos"], metadata=result.get("metadata", {}))

@router.post("/rank", response_model=RankResponse, response_model_exclude_unset=True)
def rank_videos(request: RankRequest):
    """
    Order the candidate videos for one user, most relevant first.
    """
    return _to_response(rank_candidates(request))

@router.post("/related", response_model=RankResponse, response_model_exclude_unset=True)
def related_videos(request: RelatedVideosRequest):
    """
    Ranked "up next" list for the video currently being watched.
    """
    return _to_response(get_related_videos(request))

@router.post("/explain", response_model=ExplainResponse, response_model_exclude_unset=True)
def explain(request: RankRequest):
    """
    Ranked candidates with the contribution of every scoring term.
    """
    scores = explain_ranking(request)
    return ExplainResponse(
        scores=[ScoredVideo(video=score.video, breakdown=score.breakdown) for score in scores]
    )
