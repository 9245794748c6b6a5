"""Build `questions.json` round buckets from raw question occurrences.

This runs at data-preparation time. The query path trusts the totals written
here (`commonPatterns`, `uniqueQuestions`, leaderboard) and never recomputes
them.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Sequence

from roundtable.core.utils import utcnow_iso
from roundtable.schemas.experiences import ExperienceRecord
from roundtable.schemas.questions import (
    Question,
    QuestionOccurrence,
    QuestionsDataset,
    QuestionSource,
    QuestionStats,
    RoundBucket,
    RoundStats,
    TopQuestion,
)
from roundtable.services.experience_accessors import RecordLike, coerce_record
from roundtable.services.question_aggregation import ROUND_NUMBERS, fold_questions

logger = logging.getLogger(__name__)


def _add(values: list[str], value: str | None) -> None:
    if value and value not in values:
        values.append(value)


def _extend(values: list[str], items: Iterable[str]) -> None:
    for item in items:
        _add(values, item)


def group_round_occurrences(occurrences: Iterable[QuestionOccurrence]) -> list[Question]:
    """Collapse one round's occurrences into Questions, keyed by `id` in encounter order."""

    grouped: dict[str, Question] = {}
    for occ in occurrences:
        question = grouped.get(occ.id)
        if question is None:
            question = Question(id=occ.id, name=occ.name, category=occ.category)
            grouped[occ.id] = question

        source = QuestionSource(id=occ.source_id, round_name=occ.round_name)
        if source not in question.sources:
            question.sources.append(source)
        _add(question.variations, occ.variation_text)
        _extend(question.follow_ups, occ.follow_ups)
        _extend(question.gotchas, occ.gotchas)
        _add(question.difficulties, occ.difficulty)
        _extend(question.leetcode_similar, occ.leetcode_similar)
        _add(question.approaches, occ.approach)
        _extend(question.topics, occ.topics)
    return list(grouped.values())


def build_round_buckets(
    occurrences: Iterable[QuestionOccurrence],
    round_numbers: Sequence[int] = ROUND_NUMBERS,
) -> dict[str, RoundBucket]:
    """Round buckets keyed by round number (as a string); empty rounds are omitted."""

    by_round: dict[int, list[QuestionOccurrence]] = defaultdict(list)
    for occ in occurrences:
        if occ.round_number not in round_numbers:
            logger.debug("Occurrence %s in round %s ignored", occ.id, occ.round_number)
            continue
        by_round[occ.round_number].append(occ)

    questions_by_round = {
        n: group_round_occurrences(by_round[n]) for n in round_numbers if by_round[n]
    }

    rounds_per_id: dict[str, set[int]] = defaultdict(set)
    for number, questions in questions_by_round.items():
        for q in questions:
            rounds_per_id[q.id].add(number)

    buckets: dict[str, RoundBucket] = {}
    for number, questions in questions_by_round.items():
        common = sum(1 for q in questions if len(rounds_per_id[q.id]) > 1)
        buckets[str(number)] = RoundBucket(
            total=len(questions),
            common_patterns=common,
            unique_questions=len(questions) - common,
            questions=questions,
        )
    return buckets


def build_top_questions(
    buckets: dict[str, RoundBucket],
    *,
    limit: int = 20,
    round_numbers: Sequence[int] = ROUND_NUMBERS,
) -> list[TopQuestion]:
    rounds_per_id: dict[str, list[int]] = defaultdict(list)
    acc: dict[str, Question] = {}
    for number in round_numbers:
        bucket = buckets.get(str(number))
        if bucket is None:
            continue
        for q in bucket.questions:
            if number not in rounds_per_id[q.id]:
                rounds_per_id[q.id].append(number)
        fold_questions(bucket.questions, acc)

    ranked = sorted(acc.values(), key=lambda q: len(q.sources), reverse=True)
    return [
        TopQuestion(
            id=q.id,
            name=q.name,
            category=q.category,
            count=len(q.sources),
            rounds=sorted(rounds_per_id[q.id]),
        )
        for q in ranked[: max(0, int(limit))]
    ]


def build_questions_dataset(
    occurrences: Iterable[QuestionOccurrence],
    *,
    total_experiences: int | None = None,
    top_n: int = 20,
    generated_at: str | None = None,
) -> QuestionsDataset:
    """Assemble a complete questions dataset from raw occurrences."""

    occurrences = list(occurrences)
    buckets = build_round_buckets(occurrences)

    by_round = [
        RoundStats(
            round=int(key),
            total=bucket.total,
            common=bucket.common_patterns,
            unique=bucket.unique_questions,
        )
        for key, bucket in buckets.items()
    ]
    distinct_ids = {q.id for bucket in buckets.values() for q in bucket.questions}
    categories = sorted({q.category for bucket in buckets.values() for q in bucket.questions})
    if total_experiences is None:
        total_experiences = len({occ.source_id for occ in occurrences})

    dataset = QuestionsDataset(
        generated_at=generated_at or utcnow_iso(),
        total_experiences=total_experiences,
        categories=categories,
        top_questions=build_top_questions(buckets, limit=top_n),
        stats=QuestionStats(total_questions=len(distinct_ids), by_round=by_round),
        rounds=buckets,
    )
    logger.info(
        "Built questions dataset: %d questions across %d rounds from %d occurrences",
        len(distinct_ids),
        len(buckets),
        len(occurrences),
    )
    return dataset


def occurrences_from_experiences(records: Iterable[RecordLike]) -> list[QuestionOccurrence]:
    """Extract occurrences from experience rounds whose questions carry an upstream id.

    Questions without both `id` and `category` have not been classified yet and
    are skipped.
    """
    out: list[QuestionOccurrence] = []
    skipped = 0
    for raw in records:
        exp: ExperienceRecord = coerce_record(raw)
        source_id = exp.id or exp.folder
        if not source_id:
            continue
        for round_ in exp.rounds:
            if round_.round_number is None or round_.round_number < 1:
                continue
            round_name = round_.name or f"Round {round_.round_number}"
            for item in round_.questions:
                if not (item.id and item.category):
                    skipped += 1
                    continue
                topics = list(item.topics)
                if item.topic and item.topic not in topics:
                    topics.insert(0, item.topic)
                out.append(
                    QuestionOccurrence(
                        id=item.id,
                        name=item.name or item.question,
                        category=item.category,
                        source_id=source_id,
                        round_name=round_name,
                        round_number=round_.round_number,
                        variation_text=item.question or None,
                        follow_ups=item.follow_ups,
                        gotchas=item.gotchas,
                        difficulty=item.difficulty,
                        leetcode_similar=item.leetcode_similar,
                        topics=topics,
                        approach=item.approach,
                    )
                )
    if skipped:
        logger.info("Skipped %d unclassified round questions", skipped)
    return out


__all__ = [
    "build_questions_dataset",
    "build_round_buckets",
    "build_top_questions",
    "group_round_occurrences",
    "occurrences_from_experiences",
]
