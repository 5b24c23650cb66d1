# Models for the video data the front-end sends to the ranking service
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional, Union
from datetime import datetime


class VideoRecord(BaseModel):
    """
    A video as the front-end knows it. Only category, counts, duration and
    creation time feed the ranking; every other field (known or not) is
    carried through untouched.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Union[int, str]
    category_id: Optional[Union[int, str]] = Field(default=None, alias="categoryId")
    user_id: Optional[Union[int, str]] = Field(default=None, alias="userId")
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail_url: Optional[str] = Field(default=None, alias="thumbnailUrl")
    video_url: Optional[str] = Field(default=None, alias="videoUrl")
    views: Optional[Union[int, float]] = None
    likes: Optional[Union[int, float]] = None
    dislikes: Optional[Union[int, float]] = None
    duration: Optional[Union[int, float]] = None  # seconds
    # Kept as sent; the ranking engine parses it and treats bad values as very old
    created_at: Optional[Union[datetime, str]] = Field(default=None, alias="createdAt")


class UserPreferences(BaseModel):
    """Signals about the viewer. Unknown fields are dropped, never rejected."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    preferred_device: Optional[str] = Field(default=None, alias="preferredDevice")

    @field_validator("preferred_device", mode="before")
    @classmethod
    def _ignore_non_string_device(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None
