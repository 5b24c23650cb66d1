from typing import Any, List, Optional, Union
from typing_extensions import TypedDict

class RankingState(TypedDict, total=False):
    """
    State object for the ranking pipeline
    Compatible with LangGraph's state handling
    """
    # Input
    candidates: List[Any]
    history: List[Any]
    preferences: Optional[Any]
    top_k: Optional[int]
    exclude_video_id: Optional[Union[int, str]]
    category_id: Optional[Union[int, str]]

    # Pipeline data
    prepared_candidates: Optional[List[Any]]
    ranked_videos: Optional[List[Any]]
    final_list: Optional[List[Any]]

    # Pipeline metadata
    pipeline_step: str
    error: Optional[str]
    execution_time: Optional[float]
