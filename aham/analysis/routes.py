from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from aham.core.database import get_db
from aham.core.dependency import get_ai_service
from aham.analysis.ai_providers.base import AIService
from aham.analysis.schemas import PatternAnalysis, TrendPoint
from aham.analysis.service import DEFAULT_TREND_LIMIT, get_trends, run_pattern_analysis

router = APIRouter(prefix="/analysis", tags=["Analysis"])
logger = logging.getLogger(__name__)


@router.post(
    "/patterns",
    response_model=PatternAnalysis,
    summary="Analyze patterns across the journal history",
    description="""
                Send the full entry history to the AI engine and return a short analysis of
                recurring patterns plus a few self-inquiry questions. Needs at least three
                entries; otherwise, or when the AI call fails, an empty analysis is returned.
                """,
    responses={
        200: {"description": "Analysis (possibly empty) returned."},
        500: {"description": "Failed to read the entry history."},
    },
)
def analyze_patterns_route(
    db: Session = Depends(get_db),
    ai_service: AIService = Depends(get_ai_service),
) -> PatternAnalysis:
    try:
        entries_analysis = run_pattern_analysis(db, ai_service)
    except Exception as e:
        logger.error(f"Pattern analysis pipeline failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to analyze patterns")
    return entries_analysis


@router.get(
    "/trends",
    response_model=List[TrendPoint],
    summary="Mood and sleep trends",
    description="Mood scores and sleep hours of the most recent entries, oldest first.",
    responses={
        200: {"description": "Trend points returned."},
        500: {"description": "Failed to compute trends."},
    },
)
def get_trends_route(
    limit: int = Query(DEFAULT_TREND_LIMIT, ge=1, le=366, description="Number of recent entries to include."),
    db: Session = Depends(get_db),
) -> List[TrendPoint]:
    try:
        return get_trends(db, limit)
    except Exception as e:
        logger.error(f"Failed to compute trends: {e}")
        raise HTTPException(status_code=500, detail="Failed to compute trends")
