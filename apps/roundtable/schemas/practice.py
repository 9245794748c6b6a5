from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from roundtable.schemas.solutions import SolutionInfo


class SolutionFilter(str, Enum):
    all = "all"
    has_solution = "has_solution"
    no_solution = "no_solution"
    has_main = "has_main"
    has_followups = "has_followups"


class ProblemDifficulty(BaseModel):
    model_config = ConfigDict(extra="allow")

    overall: str = "unknown"


class ProblemFollowUp(BaseModel):
    title: str
    difficulty: Optional[str] = None


class PracticeProblem(BaseModel):
    """A practice problem from `all_problems.json`."""

    model_config = ConfigDict(extra="allow")

    problem_id: str
    title: str
    emoji: Optional[str] = None
    category: str = "General"
    difficulty: ProblemDifficulty = Field(default_factory=ProblemDifficulty)
    estimated_time: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    companies: List[str] = Field(default_factory=list)
    frequency: Optional[int] = None
    leetcode_similar: List[str] = Field(default_factory=list)
    follow_ups: List[ProblemFollowUp] = Field(default_factory=list)


class ProblemsDataset(BaseModel):
    model_config = ConfigDict(extra="allow")

    generated_at: Optional[str] = None
    total_problems: int = 0
    problems: List[PracticeProblem] = Field(default_factory=list)


class PracticeProblemRow(PracticeProblem):
    solution: Optional[SolutionInfo] = None


class PracticeProblemsResponse(BaseModel):
    total: int
    count: int
    categories: List[str] = Field(default_factory=list)
    solutions_available: bool = Field(
        default=False, description="False when the solution manifest could not be built"
    )
    problems: List[PracticeProblemRow]


class GeneratedProblem(BaseModel):
    """Entry of `generated_problems.json`; only `id` is required."""

    model_config = ConfigDict(extra="allow")

    id: str
