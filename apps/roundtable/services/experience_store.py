from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from roundtable.core.utils import contains_ci
from roundtable.schemas.experiences import (
    CodingQuestionSummary,
    ExperienceFilterOptions,
    ExperienceRecord,
    ExperiencesDataset,
    ExperienceStatistics,
    NormalizedExperience,
    OutcomeBreakdown,
)
from roundtable.services.experience_accessors import (
    level_of,
    normalize_experience,
    outcome_of,
    post_type_of,
    title_of,
)

logger = logging.getLogger(__name__)

ACTUAL_POST_TYPES = frozenset({"experience", "question_share"})
MIN_CODING_QUESTION_LENGTH = 10


def _active(value: str | None) -> bool:
    return bool(value and value.strip() and value.strip().lower() != "all")


def is_accepted(outcome: str) -> bool:
    lowered = outcome.lower()
    return "accepted" in lowered or "offer" in lowered


@dataclass
class ExperienceStore:
    """Read-only view over one loaded experiences dataset."""

    dataset: ExperiencesDataset
    _normalized: list[NormalizedExperience] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._normalized = [normalize_experience(exp) for exp in self.dataset.experiences]
        logger.info(
            "Experience store ready: %d records for %s",
            len(self._normalized),
            self.dataset.company or "unknown company",
        )

    @property
    def company(self) -> str:
        return self.dataset.company

    def all(self) -> list[ExperienceRecord]:
        return list(self.dataset.experiences)

    def normalized(self) -> list[NormalizedExperience]:
        return list(self._normalized)

    def get(self, experience_id: str) -> ExperienceRecord | None:
        """Look up by `id` or `folder`."""
        for exp in self.dataset.experiences:
            if exp.id == experience_id or exp.folder == experience_id:
                return exp
        return None

    def filter(
        self,
        *,
        outcome: str | None = None,
        level: str | None = None,
        post_type: str | None = None,
        search: str | None = None,
    ) -> list[ExperienceRecord]:
        out: list[ExperienceRecord] = []
        for exp in self.dataset.experiences:
            if _active(outcome) and not contains_ci(outcome_of(exp), outcome.strip()):
                continue
            if _active(level) and not contains_ci(level_of(exp), level.strip()):
                continue
            if _active(post_type) and not contains_ci(post_type_of(exp), post_type.strip()):
                continue
            if search:
                if not (contains_ci(title_of(exp), search) or contains_ci(exp.summary, search)):
                    continue
            out.append(exp)
        return out

    def filter_normalized(self, **filters: str | None) -> list[NormalizedExperience]:
        return [normalize_experience(exp) for exp in self.filter(**filters)]

    def unique_outcomes(self) -> list[str]:
        return sorted({outcome_of(exp) for exp in self.dataset.experiences})

    def unique_levels(self) -> list[str]:
        return sorted({level_of(exp) for exp in self.dataset.experiences})

    def unique_post_types(self) -> list[str]:
        return sorted({post_type_of(exp) for exp in self.dataset.experiences})

    def filter_options(self) -> ExperienceFilterOptions:
        return ExperienceFilterOptions(
            outcomes=self.unique_outcomes(),
            levels=self.unique_levels(),
            post_types=self.unique_post_types(),
        )

    def actual_experiences(self) -> list[ExperienceRecord]:
        """Records with real interview content (not help requests or general queries)."""
        return [
            exp
            for exp in self.dataset.experiences
            if post_type_of(exp).lower() in ACTUAL_POST_TYPES
        ]

    def by_outcome(self, outcome: str) -> list[ExperienceRecord]:
        return [exp for exp in self.dataset.experiences if contains_ci(outcome_of(exp), outcome)]

    def pass_rate(self) -> int:
        total = len(self.dataset.experiences)
        if total == 0:
            return 0
        accepted = sum(1 for exp in self.dataset.experiences if is_accepted(outcome_of(exp)))
        # Half-up rounding, not banker's.
        return math.floor(accepted / total * 100 + 0.5)

    def coding_questions(self) -> list[CodingQuestionSummary]:
        out: list[CodingQuestionSummary] = []
        for exp in self.dataset.experiences:
            for q in exp.coding_questions:
                if len(q.question) <= MIN_CODING_QUESTION_LENGTH:
                    continue
                out.append(
                    CodingQuestionSummary(
                        question=q.question,
                        topic=q.topic or "Unknown",
                        difficulty=q.difficulty or "unknown",
                        round=q.round or q.from_round or "Unknown",
                        experience_id=exp.id,
                        experience_title=title_of(exp),
                        approach=q.approach,
                        leetcode_similar=q.leetcode_similar or None,
                        gotchas=q.gotchas,
                        follow_ups=q.follow_ups,
                    )
                )
        return out

    def statistics(self) -> ExperienceStatistics:
        actual = self.actual_experiences()
        outcomes = OutcomeBreakdown()
        for exp in actual:
            outcome = outcome_of(exp).lower()
            if is_accepted(outcome):
                outcomes.accepted += 1
            elif "reject" in outcome:
                outcomes.rejected += 1
            elif "pending" in outcome:
                outcomes.pending += 1
            else:
                outcomes.unknown += 1

        return ExperienceStatistics(
            total=len(self.dataset.experiences),
            actual_experiences=len(actual),
            outcomes=outcomes,
            pass_rate=self.pass_rate(),
            coding_questions=len(self.coding_questions()),
        )


__all__ = ["ACTUAL_POST_TYPES", "ExperienceStore", "is_accepted"]
