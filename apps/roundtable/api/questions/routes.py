from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query

from roundtable.core.dependencies import get_question_catalog_service
from roundtable.core.exceptions import NotFoundError
from roundtable.schemas.questions import (
    QuestionQueryResponse,
    QuestionStatsResponse,
    RoundSummary,
)
from roundtable.services.question_catalog import QuestionCatalogService

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.get("", response_model=QuestionQueryResponse)
def list_questions(
    round: str = Query("all", description='"all" or a round number (1-5)'),
    category: str = Query("all", description='Exact category, or "all"'),
    q: str = Query("", description="Case-insensitive search text"),
    svc: QuestionCatalogService = Depends(get_question_catalog_service),
) -> QuestionQueryResponse:
    return svc.query(round_key=round, category=category, search=q)


@router.get("/categories", response_model=list[str])
def list_categories(
    svc: QuestionCatalogService = Depends(get_question_catalog_service),
) -> list[str]:
    return svc.categories()


@router.get("/stats", response_model=QuestionStatsResponse)
def question_stats(
    svc: QuestionCatalogService = Depends(get_question_catalog_service),
) -> QuestionStatsResponse:
    return svc.stats()


@router.get("/rounds/{round_number}", response_model=RoundSummary)
def round_summary(
    round_number: int = Path(..., ge=1),
    svc: QuestionCatalogService = Depends(get_question_catalog_service),
) -> RoundSummary:
    summary = svc.round_summary(round_number)
    if summary is None:
        raise NotFoundError(f"No data for round {round_number}")
    return summary
