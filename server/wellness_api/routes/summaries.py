"""AI summary and recommendation API routes."""
from fastapi import APIRouter, Depends

from ..dependencies import (
    get_recommendation_requester,
    get_recommendation_store,
    get_summary_requester,
    get_summary_store,
)
from ..models.summary import (
    AIRecommendation,
    AISummary,
    RecommendationRequest,
    RecommendationResponse,
    SummaryRequest,
    SummaryResponse,
)
from ..services.auth import Session, require_session
from ..services.recommendation_requester import RecommendationRequester
from ..services.summary_requester import SummaryRequester
from ..stores import RecommendationStore, SummaryStore

router = APIRouter(prefix="/api", tags=["AI Insights"])


@router.post("/summaries", response_model=SummaryResponse, response_model_by_alias=True)
async def generate_summary(
    body: SummaryRequest,
    session: Session = Depends(require_session),
    requester: SummaryRequester = Depends(get_summary_requester),
):
    """
    Generate an AI wellness summary for the requested window.

    Always answers 200: when the text API is unavailable the response
    carries fallback content with ``outcome`` set to ``fallback``.
    """
    result = await requester.generate(session, body.time_range)
    return SummaryResponse(
        summary=result.summary,
        recommendations=result.recommendations,
        outcome=result.outcome,
        mood_logs_count=result.mood_logs_count,
        diary_entries_count=result.diary_entries_count,
        summary_id=result.summary_id,
        error=result.error,
    )


@router.get("/summaries", response_model=list[AISummary])
async def summary_history(
    session: Session = Depends(require_session),
    summaries: SummaryStore = Depends(get_summary_store),
):
    return summaries.list_for_user(session.user_id)


@router.post("/recommendations", response_model=RecommendationResponse, response_model_by_alias=True)
async def generate_recommendations(
    body: RecommendationRequest,
    session: Session = Depends(require_session),
    requester: RecommendationRequester = Depends(get_recommendation_requester),
):
    result = await requester.generate(session, body.source, body.context)
    return RecommendationResponse(
        recommendations=result.recommendations,
        outcome=result.outcome,
        recommendation_id=result.recommendation_id,
        error=result.error,
    )


@router.get("/recommendations", response_model=list[AIRecommendation])
async def recommendation_history(
    session: Session = Depends(require_session),
    recommendations: RecommendationStore = Depends(get_recommendation_store),
):
    return recommendations.list_for_user(session.user_id)
