"""Cross-round question aggregation.

Every round bucket carries its own copy of a question (phrasing, follow-ups,
gotchas, sources). The "all rounds" view folds those copies into one entry per
question `id`:

- `sources` gain a pair only if no existing source has the same
  `(id, roundName)`;
- `variations`, `followUps` and `gotchas` gain a string only if it is not
  already present;
- every other field (`name`, `category`, `difficulties`, `leetcodeSimilar`,
  `approaches`, `topics`) comes from the first encounter and is never
  overwritten. A later round that files the same id under another category
  does not move it.

Round buckets are never mutated; the accumulator holds copies.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Sequence

from roundtable.schemas.questions import Question, RoundBucket

logger = logging.getLogger(__name__)

ROUND_NUMBERS: tuple[int, ...] = (1, 2, 3, 4, 5)

# Fields merged by value on every encounter; everything else is first-writer-wins.
MERGED_LIST_FIELDS: tuple[str, ...] = ("variations", "follow_ups", "gotchas")


def _append_missing(target: list, items: Iterable) -> None:
    for item in items:
        if item not in target:
            target.append(item)


def seed_question(question: Question) -> Question:
    """Copy a question so later merges never touch the round bucket it came from."""

    return question.model_copy(
        update={
            "sources": list(question.sources),
            "variations": list(question.variations),
            "follow_ups": list(question.follow_ups),
            "gotchas": list(question.gotchas),
            "difficulties": list(question.difficulties),
            "leetcode_similar": list(question.leetcode_similar),
            "approaches": list(question.approaches),
            "topics": list(question.topics),
        }
    )


def merge_question(existing: Question, incoming: Question) -> Question:
    """Merge `incoming` into `existing` in place and return `existing`.

    QuestionSource is a frozen model, so `in` compares `(id, round_name)` by value.
    """
    _append_missing(existing.sources, incoming.sources)
    for field in MERGED_LIST_FIELDS:
        _append_missing(getattr(existing, field), getattr(incoming, field))
    if incoming.category != existing.category:
        logger.debug(
            "Question %s seen as %r and %r; keeping the first",
            existing.id,
            existing.category,
            incoming.category,
        )
    return existing


def fold_questions(
    questions: Iterable[Question], accumulator: dict[str, Question] | None = None
) -> dict[str, Question]:
    """Fold questions into an id-keyed accumulator (insertion order = first encounter)."""

    acc: dict[str, Question] = {} if accumulator is None else accumulator
    for question in questions:
        existing = acc.get(question.id)
        if existing is None:
            acc[question.id] = seed_question(question)
        else:
            merge_question(existing, question)
    return acc


def aggregate_rounds(
    rounds: Mapping[str, RoundBucket],
    round_numbers: Sequence[int] = ROUND_NUMBERS,
) -> list[Question]:
    """Deduplicated questions across `round_numbers`, in first-encounter order.

    Round buckets missing from `rounds` contribute nothing.
    """
    acc: dict[str, Question] = {}
    for number in round_numbers:
        bucket = rounds.get(str(number))
        if bucket is None:
            logger.debug("Round %s has no bucket; skipping", number)
            continue
        fold_questions(bucket.questions, acc)
    return list(acc.values())


def round_questions(rounds: Mapping[str, RoundBucket], round_key: str | int) -> list[Question]:
    """Questions of a single round, unmerged. Unknown rounds yield an empty list."""

    bucket = rounds.get(str(round_key))
    if bucket is None:
        return []
    return list(bucket.questions)


__all__ = [
    "MERGED_LIST_FIELDS",
    "ROUND_NUMBERS",
    "aggregate_rounds",
    "fold_questions",
    "merge_question",
    "round_questions",
    "seed_question",
]
