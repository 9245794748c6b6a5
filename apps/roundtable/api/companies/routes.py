from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from roundtable.core.dependencies import get_company_directory, get_experience_store_optional
from roundtable.core.exceptions import NotFoundError
from roundtable.schemas.companies import CompanyDetail, CompanySummary
from roundtable.services.companies import (
    DIFFICULTY_LEVELS,
    CompanyDirectory,
    coding_topics,
    filter_coding_questions,
)
from roundtable.services.experience_store import ExperienceStore

router = APIRouter(prefix="/api/companies", tags=["companies"])


@router.get("", response_model=list[CompanySummary])
def list_companies(
    directory: CompanyDirectory = Depends(get_company_directory),
) -> list[CompanySummary]:
    return directory.summaries()


@router.get("/{slug}", response_model=CompanyDetail)
def get_company(
    slug: str,
    topic: str = Query("", description="Substring of the coding question topic"),
    difficulty: str = Query("", description="Exact coding question difficulty"),
    directory: CompanyDirectory = Depends(get_company_directory),
    store: ExperienceStore | None = Depends(get_experience_store_optional),
) -> CompanyDetail:
    company = directory.by_slug(slug)
    if company is None:
        raise NotFoundError(f"Company not found: {slug}")
    return CompanyDetail(
        profile=company,
        stats=directory.stats(company),
        topics=coding_topics(company),
        difficulties=list(DIFFICULTY_LEVELS),
        coding_questions=filter_coding_questions(company, topic, difficulty),
        related_experiences=(
            directory.related_experiences(company, store) if store is not None else []
        ),
    )
