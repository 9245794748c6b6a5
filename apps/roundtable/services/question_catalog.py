from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from roundtable.schemas.questions import (
    CatalogQuestion,
    Question,
    QuestionQueryResponse,
    QuestionsDataset,
    QuestionStatsResponse,
    RoundSummary,
)
from roundtable.services.question_aggregation import (
    ROUND_NUMBERS,
    aggregate_rounds,
    round_questions,
)

logger = logging.getLogger(__name__)

ALL = "all"


def _is_all(value: str | int | None) -> bool:
    # Only the literal "all" (or an omitted value) disables a filter.
    return value is None or value == ALL


def select_round(
    dataset: QuestionsDataset,
    round_key: str | int = ALL,
    *,
    round_numbers: Sequence[int] = ROUND_NUMBERS,
) -> list[Question]:
    """`"all"` aggregates across rounds; a round number returns that bucket as-is."""

    if _is_all(round_key):
        return aggregate_rounds(dataset.rounds, round_numbers)
    return round_questions(dataset.rounds, round_key)


def filter_by_category(questions: Iterable[Question], category: str | None = ALL) -> list[Question]:
    if _is_all(category):
        return list(questions)
    return [q for q in questions if q.category == category]


def matches_search(question: Question, query: str) -> bool:
    """Substring match on the lowercased query; whitespace is significant."""

    if not query.strip():
        return True
    needle = query.lower()
    if needle in question.name.lower() or needle in question.category.lower():
        return True
    for values in (question.variations, question.leetcode_similar, question.topics):
        if any(needle in v.lower() for v in values):
            return True
    return False


def search_questions(questions: Iterable[Question], query: str | None = "") -> list[Question]:
    if not query or not query.strip():
        return list(questions)
    return [q for q in questions if matches_search(q, query)]


def sort_by_popularity(questions: Iterable[Question]) -> list[Question]:
    return sorted(questions, key=lambda q: len(q.sources), reverse=True)


def query_questions(
    dataset: QuestionsDataset,
    round_key: str | int = ALL,
    category: str | None = ALL,
    search: str | None = "",
) -> list[Question]:
    """Round select, category filter, text search, then popularity sort."""

    questions = select_round(dataset, round_key)
    questions = filter_by_category(questions, category)
    questions = search_questions(questions, search)
    return sort_by_popularity(questions)


def list_categories(dataset: QuestionsDataset) -> list[str]:
    if dataset.categories:
        return list(dataset.categories)
    seen = {q.category for bucket in dataset.rounds.values() for q in bucket.questions}
    return sorted(seen)


@dataclass
class QuestionCatalogService:
    """Serves the question catalog for one loaded dataset snapshot."""

    dataset: QuestionsDataset
    generated_problem_ids: frozenset[str] = field(default_factory=frozenset)

    def query(
        self,
        *,
        round_key: str | int = ALL,
        category: str | None = ALL,
        search: str | None = "",
    ) -> QuestionQueryResponse:
        questions = query_questions(self.dataset, round_key, category, search)
        rows = [self._annotate(q) for q in questions]
        logger.debug(
            "Question query round=%s category=%s search=%r -> %d rows",
            round_key,
            category,
            search,
            len(rows),
        )
        return QuestionQueryResponse(
            round=str(round_key),
            category=ALL if category is None else category,
            query=search or "",
            total=len(rows),
            questions=rows,
        )

    def categories(self) -> list[str]:
        return list_categories(self.dataset)

    def stats(self) -> QuestionStatsResponse:
        return QuestionStatsResponse(
            generated_at=self.dataset.generated_at,
            total_experiences=self.dataset.total_experiences,
            stats=self.dataset.stats,
            top_questions=self.dataset.top_questions,
        )

    def round_summary(self, round_number: int) -> RoundSummary | None:
        bucket = self.dataset.rounds.get(str(round_number))
        if bucket is None:
            return None
        return RoundSummary(
            round=round_number,
            total=bucket.total,
            common_patterns=bucket.common_patterns,
            unique_questions=bucket.unique_questions,
        )

    def _annotate(self, question: Question) -> CatalogQuestion:
        return CatalogQuestion(
            **question.model_dump(),
            has_generated_problem=question.id in self.generated_problem_ids,
            asked_count=len(question.sources),
        )


__all__ = [
    "ALL",
    "QuestionCatalogService",
    "filter_by_category",
    "list_categories",
    "matches_search",
    "query_questions",
    "search_questions",
    "select_round",
    "sort_by_popularity",
]
