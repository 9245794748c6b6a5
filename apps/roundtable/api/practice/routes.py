from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from roundtable.core.dependencies import (
    get_generated_problems,
    get_problems_dataset,
    get_solution_manifest_optional,
)
from roundtable.core.exceptions import NotFoundError
from roundtable.schemas.practice import (
    GeneratedProblem,
    PracticeProblemRow,
    PracticeProblemsResponse,
    ProblemsDataset,
    SolutionFilter,
)
from roundtable.schemas.solutions import SolutionManifest
from roundtable.services.practice import filter_problems, problem_categories, solution_info

router = APIRouter(prefix="/api", tags=["practice"])


def _row(problem, manifest: SolutionManifest | None) -> PracticeProblemRow:
    return PracticeProblemRow(
        **problem.model_dump(), solution=solution_info(manifest, problem.problem_id)
    )


@router.get("/practice/problems", response_model=PracticeProblemsResponse)
def list_practice_problems(
    category: str = Query("all"),
    difficulty: str = Query("all"),
    q: str = Query("", description="Search in title and tags"),
    solution: SolutionFilter = Query(SolutionFilter.all),
    dataset: ProblemsDataset = Depends(get_problems_dataset),
    manifest: SolutionManifest | None = Depends(get_solution_manifest_optional),
) -> PracticeProblemsResponse:
    problems = filter_problems(
        dataset.problems,
        manifest,
        category=category,
        difficulty=difficulty,
        search=q.strip(),
        solution_filter=solution,
    )
    return PracticeProblemsResponse(
        total=len(dataset.problems),
        count=len(problems),
        categories=problem_categories(dataset.problems),
        solutions_available=manifest is not None,
        problems=[_row(p, manifest) for p in problems],
    )


@router.get("/practice/problems/{problem_id}", response_model=PracticeProblemRow)
def get_practice_problem(
    problem_id: str,
    dataset: ProblemsDataset = Depends(get_problems_dataset),
    manifest: SolutionManifest | None = Depends(get_solution_manifest_optional),
) -> PracticeProblemRow:
    for problem in dataset.problems:
        if problem.problem_id == problem_id:
            return _row(problem, manifest)
    raise NotFoundError(f"Practice problem not found: {problem_id}")


@router.get("/problems/generated/{problem_id}")
def get_generated_problem(
    problem_id: str,
    problems: tuple[GeneratedProblem, ...] = Depends(get_generated_problems),
) -> dict[str, Any]:
    for problem in problems:
        if problem.id == problem_id:
            return problem.model_dump(mode="json")
    raise NotFoundError(f"Generated problem not found: {problem_id}")
