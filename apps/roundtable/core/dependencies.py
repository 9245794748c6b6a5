"""Central dependency providers (FastAPI + scripts).

Datasets are read once per process and cached here; the cached snapshots are
never mutated, so tests can clear the caches or override the providers.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from roundtable.core.exceptions import DatasetUnavailableError, SolutionsUnavailableError
from roundtable.core.settings import settings
from roundtable.schemas.practice import GeneratedProblem, ProblemsDataset
from roundtable.schemas.questions import QuestionsDataset
from roundtable.schemas.solutions import SolutionManifest
from roundtable.services.companies import CompanyDirectory
from roundtable.services.datasets import DatasetLoader
from roundtable.services.experience_store import ExperienceStore
from roundtable.services.question_catalog import QuestionCatalogService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_dataset_loader() -> DatasetLoader:
    return DatasetLoader.from_settings(settings)


@lru_cache(maxsize=1)
def get_questions_dataset() -> QuestionsDataset:
    return get_dataset_loader().load_questions()


@lru_cache(maxsize=1)
def get_generated_problems() -> tuple[GeneratedProblem, ...]:
    return tuple(get_dataset_loader().load_generated_problems())


def get_generated_problem_ids() -> frozenset[str]:
    return frozenset(p.id for p in get_generated_problems())


def get_question_catalog_service() -> QuestionCatalogService:
    return QuestionCatalogService(
        dataset=get_questions_dataset(),
        generated_problem_ids=get_generated_problem_ids(),
    )


@lru_cache(maxsize=1)
def get_experience_store() -> ExperienceStore:
    return ExperienceStore(dataset=get_dataset_loader().load_experiences())


def get_experience_store_optional() -> ExperienceStore | None:
    try:
        return get_experience_store()
    except DatasetUnavailableError as exc:
        logger.info("Experiences unavailable: %s", exc)
        return None


@lru_cache(maxsize=1)
def get_problems_dataset() -> ProblemsDataset:
    return get_dataset_loader().load_problems()


@lru_cache(maxsize=1)
def get_company_directory() -> CompanyDirectory:
    return CompanyDirectory(companies=get_dataset_loader().load_companies())


def get_solution_manifest() -> SolutionManifest:
    """Rebuilt per request; the solutions directory may change between deploys."""
    return get_dataset_loader().solution_manifest()


def get_solution_manifest_optional() -> SolutionManifest | None:
    try:
        return get_solution_manifest()
    except SolutionsUnavailableError as exc:
        logger.info("Solution manifest unavailable: %s", exc)
        return None


def clear_caches() -> None:
    """Drop every cached dataset (tests, or after regenerating data files)."""
    for provider in (
        get_dataset_loader,
        get_questions_dataset,
        get_generated_problems,
        get_experience_store,
        get_problems_dataset,
        get_company_directory,
    ):
        provider.cache_clear()
