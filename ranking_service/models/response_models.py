# Pydantic models for outgoing API responses
from pydantic import BaseModel
from typing import Any, Dict, List

from ranking_service.models.ranking_models import ScoreBreakdown
from ranking_service.models.video_models import VideoRecord

class RankResponse(BaseModel):
    videos: List[VideoRecord]
    metadata: Dict[str, Any] = {}

class ScoredVideo(BaseModel):
    video: VideoRecord
    breakdown: ScoreBreakdown

class ExplainResponse(BaseModel):
    scores: List[ScoredVideo]
