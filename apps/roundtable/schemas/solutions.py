from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class SolutionInfo(BaseModel):
    """Which solution files exist for one practice problem."""

    main: bool = False
    parts: List[int] = Field(default_factory=list, description="Follow-up part numbers, ascending")

    @property
    def has_any(self) -> bool:
        return self.main or bool(self.parts)


class SolutionManifest(BaseModel):
    generated_at: str
    total_with_solutions: int
    solutions: Dict[str, SolutionInfo] = Field(default_factory=dict)
