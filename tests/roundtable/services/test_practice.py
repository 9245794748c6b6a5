from __future__ import annotations

import pytest
from roundtable.schemas.practice import PracticeProblem, SolutionFilter
from roundtable.schemas.solutions import SolutionInfo, SolutionManifest
from roundtable.services.practice import (
    filter_problems,
    matches_solution_filter,
    problem_categories,
    solution_info,
)


def _problem(pid: str, category: str, difficulty: str, tags=(), title=None) -> PracticeProblem:
    return PracticeProblem(
        problem_id=pid,
        title=title or pid.replace("-", " ").title(),
        category=category,
        difficulty={"overall": difficulty},
        tags=list(tags),
    )


@pytest.fixture
def problems() -> list[PracticeProblem]:
    return [
        _problem("lru-cache", "Design", "medium", tags=["hashmap", "linked list"]),
        _problem("word-ladder", "Graphs", "hard", tags=["bfs"]),
        _problem("two-sum", "Arrays", "easy", tags=["hashmap"]),
    ]


@pytest.fixture
def manifest() -> SolutionManifest:
    return SolutionManifest(
        generated_at="2024-01-01T00:00:00Z",
        total_with_solutions=2,
        solutions={
            "lru-cache": SolutionInfo(main=True, parts=[1]),
            "word-ladder": SolutionInfo(main=False, parts=[2]),
        },
    )


def _ids(rows):
    return [p.problem_id for p in rows]


def test_category_difficulty_and_search(problems, manifest):
    assert _ids(filter_problems(problems, manifest, category="Graphs")) == ["word-ladder"]
    assert _ids(filter_problems(problems, manifest, difficulty="easy")) == ["two-sum"]
    assert _ids(filter_problems(problems, manifest, search="HASHMAP")) == ["lru-cache", "two-sum"]
    assert _ids(filter_problems(problems, manifest, search="ladder")) == ["word-ladder"]


@pytest.mark.parametrize(
    ("solution_filter", "expected"),
    [
        (SolutionFilter.all, ["lru-cache", "word-ladder", "two-sum"]),
        (SolutionFilter.has_solution, ["lru-cache", "word-ladder"]),
        (SolutionFilter.no_solution, ["two-sum"]),
        (SolutionFilter.has_main, ["lru-cache"]),
        (SolutionFilter.has_followups, ["lru-cache", "word-ladder"]),
    ],
)
def test_solution_filters(problems, manifest, solution_filter, expected):
    assert _ids(filter_problems(problems, manifest, solution_filter=solution_filter)) == expected


def test_missing_manifest_means_no_solutions(problems):
    assert _ids(filter_problems(problems, None, solution_filter=SolutionFilter.has_solution)) == []
    assert len(filter_problems(problems, None, solution_filter=SolutionFilter.no_solution)) == 3
    assert solution_info(None, "lru-cache") is None


def test_matches_solution_filter_empty_info():
    empty = SolutionInfo()
    assert matches_solution_filter(empty, SolutionFilter.no_solution)
    assert not matches_solution_filter(empty, SolutionFilter.has_solution)


def test_problem_categories_sorted(problems):
    assert problem_categories(problems) == ["Arrays", "Design", "Graphs"]
