# Video models
from .video_models import VideoRecord, UserPreferences

# Ranking models
from .ranking_models import RankingWeights, ScoreBreakdown, VideoScore

# Pipeline models
from .pipeline_models import RankingState

# Request/Response models
from .request_models import *
from .response_models import *

__all__ = [
    "VideoRecord",
    "UserPreferences",
    "RankingWeights",
    "ScoreBreakdown",
    "VideoScore",
    "RankingState",
    "RankRequest",
    "RelatedVideosRequest",
    "RankResponse",
    "ScoredVideo",
    "ExplainResponse",
]
