from typing import Any, Dict, List, Optional, Union
from datetime import datetime, timezone
import logging
from langgraph.graph import StateGraph, END

# LangSmith tracing
from langsmith import traceable

# Import pipeline models and nodes
from ranking_service.models.pipeline_models import RankingState
from ranking_service.pipelines.prepare_candidates_node import prepare_candidates_node
from ranking_service.pipelines.rank_videos_node import rank_videos_node
from ranking_service.pipelines.limit_results_node import limit_results_node
from ranking_service.services.ranking_engine import RecommendationEngine, recommendation_engine

logger = logging.getLogger(__name__)

def _route_after_node(state: RankingState) -> str:
    return "error" if state.get("error") else "continue"

class RankingOrchestrator:
    """
    Orchestrator for the video ranking pipeline:
    1. Prepare candidates (drop the video being watched, optional category filter)
    2. Rank videos (blended heuristic score with a small random term)
    3. Limit results (top_k)
    """

    def __init__(self, engine: Optional[RecommendationEngine] = None):
        self.engine = engine or recommendation_engine
        self.graph = None
        self._build_graph()

    def _rank_videos(self, state: RankingState) -> RankingState:
        return rank_videos_node(state, engine=self.engine)

    def _build_graph(self):
        """Build the LangGraph workflow"""
        try:
            workflow = StateGraph(RankingState)

            workflow.add_node("prepare_candidates", prepare_candidates_node)
            workflow.add_node("rank_videos", self._rank_videos)
            workflow.add_node("limit_results", limit_results_node)

            # Stop at the first node that records an error
            workflow.set_entry_point("prepare_candidates")
            workflow.add_conditional_edges(
                "prepare_candidates", _route_after_node, {"continue": "rank_videos", "error": END}
            )
            workflow.add_conditional_edges(
                "rank_videos", _route_after_node, {"continue": "limit_results", "error": END}
            )
            workflow.add_edge("limit_results", END)

            self.graph = workflow.compile()
            logger.info("LangGraph ranking workflow compiled successfully")

        except Exception as e:
            logger.error(f"Error building LangGraph workflow: {str(e)}")
            self.graph = None

    def _run_sequential(self, state: RankingState) -> RankingState:
        for node in (prepare_candidates_node, self._rank_videos, limit_results_node):
            state = node(state)
            if state.get("error"):
                break
        return state

    @traceable(name="ranking_pipeline")
    def rank(self, candidates: List[Any], history: Optional[List[Any]] = None,
             preferences: Any = None, top_k: Optional[int] = None,
             exclude_video_id: Optional[Union[int, str]] = None,
             category_id: Optional[Union[int, str]] = None) -> Dict[str, Any]:
        """
        Main entry point for ranking a candidate list for one user
        """
        start_time = datetime.now(timezone.utc)

        try:
            initial_state: RankingState = {
                "candidates": list(candidates or []),
                "history": list(history or []),
                "preferences": preferences,
                "top_k": top_k,
                "exclude_video_id": exclude_video_id,
                "category_id": category_id,
                "prepared_candidates": None,
                "ranked_videos": None,
                "final_list": None,
                "pipeline_step": "initialized",
                "error": None,
                "execution_time": None,
            }

            if self.graph:
                result = self.graph.invoke(initial_state)
            else:
                # Sequential execution when the graph could not be compiled
                result = self._run_sequential(initial_state)

            execution_time = (datetime.now(timezone.utc) - start_time).total_seconds()
            result["execution_time"] = execution_time

            logger.info(f"Ranking pipeline finished at step '{result.get('pipeline_step')}' "
                        f"in {execution_time:.3f}s")

            response = {
                "videos": result.get("final_list") or [],
                "metadata": {
                    "execution_time": execution_time,
                    "total_candidates": len(initial_state["candidates"]),
                    "ranked_candidates": len(result.get("ranked_videos") or []),
                    "pipeline_step": result.get("pipeline_step", "completed"),
                },
            }
            if result.get("error"):
                response["error"] = result["error"]
            return response

        except Exception as e:
            logger.error(f"Error in ranking pipeline: {str(e)}")
            return {
                "videos": [],
                "error": str(e),
                "metadata": {
                    "execution_time": (datetime.now(timezone.utc) - start_time).total_seconds(),
                    "pipeline_step": "error",
                },
            }

# Global orchestrator instance
ranking_orchestrator = RankingOrchestrator()
