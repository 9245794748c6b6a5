from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from roundtable.core.dependencies import get_experience_store
from roundtable.core.exceptions import NotFoundError
from roundtable.schemas.experiences import (
    CodingQuestionSummary,
    ExperienceDetail,
    ExperienceFilterOptions,
    ExperienceListResponse,
    ExperienceStatistics,
)
from roundtable.services.experience_accessors import normalize_experience
from roundtable.services.experience_store import ExperienceStore

router = APIRouter(prefix="/api/experiences", tags=["experiences"])


@router.get("", response_model=ExperienceListResponse)
def list_experiences(
    outcome: str = Query("all"),
    level: str = Query("all"),
    post_type: str = Query("all"),
    q: str = Query("", description="Search in title and summary"),
    store: ExperienceStore = Depends(get_experience_store),
) -> ExperienceListResponse:
    rows = store.filter_normalized(
        outcome=outcome, level=level, post_type=post_type, search=q.strip()
    )
    return ExperienceListResponse(
        company=store.company,
        total=len(store.all()),
        count=len(rows),
        experiences=rows,
    )


@router.get("/stats", response_model=ExperienceStatistics)
def experience_stats(
    store: ExperienceStore = Depends(get_experience_store),
) -> ExperienceStatistics:
    return store.statistics()


@router.get("/filters", response_model=ExperienceFilterOptions)
def experience_filters(
    store: ExperienceStore = Depends(get_experience_store),
) -> ExperienceFilterOptions:
    return store.filter_options()


@router.get("/coding-questions", response_model=list[CodingQuestionSummary])
def coding_questions(
    store: ExperienceStore = Depends(get_experience_store),
) -> list[CodingQuestionSummary]:
    return store.coding_questions()


@router.get("/{experience_id}", response_model=ExperienceDetail)
def get_experience(
    experience_id: str,
    store: ExperienceStore = Depends(get_experience_store),
) -> ExperienceDetail:
    exp = store.get(experience_id)
    if exp is None:
        raise NotFoundError(f"Experience not found: {experience_id}")
    return ExperienceDetail(
        summary=normalize_experience(exp),
        record=exp.model_dump(mode="json", by_alias=True),
    )
