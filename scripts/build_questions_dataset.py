#!/usr/bin/env python3
"""Rebuild `questions.json` (round buckets, leaderboard, stats).

The input is either a JSON list of question occurrences (camelCase keys, one
entry per question per round per experience) or an `experiences.json` export
whose round questions already carry an `id` and `category`.

Usage:
    python -m scripts.build_questions_dataset [--input FILE] [--output FILE] [--top N]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from scripts._bootstrap import bootstrap

bootstrap()

from pydantic import TypeAdapter  # noqa: E402

from roundtable.core.logging import setup_logging  # noqa: E402
from roundtable.core.settings import settings  # noqa: E402
from roundtable.schemas.questions import QuestionOccurrence  # noqa: E402
from roundtable.services.datasets import read_json  # noqa: E402
from roundtable.services.round_buckets import (  # noqa: E402
    build_questions_dataset,
    occurrences_from_experiences,
)

logger = logging.getLogger("scripts.build_questions_dataset")

_OCCURRENCES = TypeAdapter(list[QuestionOccurrence])


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    data_dir = Path(settings.data_dir)
    p = argparse.ArgumentParser(description="Build questions.json from raw occurrences")
    p.add_argument("--input", type=Path, default=data_dir / settings.experiences_file)
    p.add_argument("--output", type=Path, default=data_dir / settings.questions_file)
    p.add_argument("--top", type=int, default=settings.top_questions_limit)
    return p.parse_args(argv)


def load_occurrences(payload: Any) -> tuple[list[QuestionOccurrence], int | None]:
    """Return occurrences plus the experience count when the input is an export."""
    if isinstance(payload, dict) and "experiences" in payload:
        records = payload.get("experiences") or []
        return occurrences_from_experiences(records), len(records)
    return _OCCURRENCES.validate_python(payload), None


def main(argv: list[str] | None = None) -> int:
    setup_logging(settings.effective_log_level)
    args = parse_args(argv)
    try:
        payload = read_json(args.input)
        occurrences, total_experiences = load_occurrences(payload)
    except (OSError, ValueError) as exc:
        # ValidationError is a ValueError subclass.
        logger.error("Cannot read occurrences from %s: %s", args.input, exc)
        return 1

    dataset = build_questions_dataset(
        occurrences, total_experiences=total_experiences, top_n=args.top
    )
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(
        json.dumps(dataset.model_dump(mode="json", by_alias=True), indent=2),
        encoding="utf-8",
    )
    logger.info(
        "Wrote %s: %d questions, %d rounds",
        args.output,
        dataset.stats.total_questions,
        len(dataset.rounds),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
