# Pydantic models for incoming API requests
from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional, Union

from ranking_service.config.settings import DEFAULT_TOP_K, MAX_CANDIDATES, RELATED_VIDEOS_LIMIT
from ranking_service.models.video_models import UserPreferences, VideoRecord

class RankRequest(BaseModel):
    candidates: List[VideoRecord] = Field(default_factory=list, max_length=MAX_CANDIDATES)
    history: List[VideoRecord] = Field(default_factory=list)
    preferences: Optional[UserPreferences] = None
    top_k: Optional[int] = Field(default=DEFAULT_TOP_K, ge=1)
    category_id: Optional[Union[int, str]] = None

    @field_validator("preferences", mode="before")
    @classmethod
    def _drop_malformed_preferences(cls, value: Any) -> Any:
        # A preferences value that is not an object means "no preferences"
        if value is None or isinstance(value, (dict, UserPreferences)):
            return value
        return None

class RelatedVideosRequest(RankRequest):
    """Ranking for the list shown next to the video being watched"""
    current_video_id: Union[int, str]
    top_k: Optional[int] = Field(default=RELATED_VIDEOS_LIMIT, ge=1)
