from __future__ import annotations

from typing import Iterable

from roundtable.schemas.practice import PracticeProblem, SolutionFilter
from roundtable.schemas.solutions import SolutionInfo, SolutionManifest


def solution_info(manifest: SolutionManifest | None, problem_id: str) -> SolutionInfo | None:
    if manifest is None:
        return None
    return manifest.solutions.get(problem_id)


def matches_solution_filter(info: SolutionInfo | None, solution_filter: SolutionFilter) -> bool:
    if solution_filter == SolutionFilter.has_solution:
        return info is not None and info.has_any
    if solution_filter == SolutionFilter.no_solution:
        return info is None or not info.has_any
    if solution_filter == SolutionFilter.has_main:
        return info is not None and info.main
    if solution_filter == SolutionFilter.has_followups:
        return info is not None and bool(info.parts)
    return True


def _matches_search(problem: PracticeProblem, query: str) -> bool:
    needle = query.lower()
    return needle in problem.title.lower() or any(needle in t.lower() for t in problem.tags)


def filter_problems(
    problems: Iterable[PracticeProblem],
    manifest: SolutionManifest | None = None,
    *,
    category: str = "all",
    difficulty: str = "all",
    search: str = "",
    solution_filter: SolutionFilter = SolutionFilter.all,
) -> list[PracticeProblem]:
    out: list[PracticeProblem] = []
    for problem in problems:
        if category != "all" and problem.category != category:
            continue
        if difficulty != "all" and problem.difficulty.overall != difficulty:
            continue
        if search and not _matches_search(problem, search):
            continue
        info = solution_info(manifest, problem.problem_id)
        if not matches_solution_filter(info, solution_filter):
            continue
        out.append(problem)
    return out


def problem_categories(problems: Iterable[PracticeProblem]) -> list[str]:
    return sorted({p.category for p in problems})


__all__ = [
    "filter_problems",
    "matches_solution_filter",
    "problem_categories",
    "solution_info",
]
