"""Uniform scalar view over interview experience records.

Records come from two export generations: `outcome` is either a bare string or
a `{result, ...}` object and `metadata` may be missing entirely. Every accessor
here has an explicit fallback and never raises, so downstream code can rely on
plain strings.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping

from dateutil import parser as date_parser
from pydantic import ValidationError

from roundtable.schemas.experiences import (
    ExperienceOutcome,
    ExperienceRecord,
    NormalizedExperience,
)

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"
UNTITLED = "Untitled Experience"
UNKNOWN_DATE = "Unknown date"

# Partial dates ("2024", "March 2024") resolve to the first month/day, not today.
_DATE_DEFAULT = datetime(2000, 1, 1)

RecordLike = ExperienceRecord | Mapping[str, Any]


def coerce_record(record: RecordLike | None) -> ExperienceRecord:
    """Validate a raw mapping into an `ExperienceRecord`, degrading to an empty one."""

    if isinstance(record, ExperienceRecord):
        return record
    if not isinstance(record, Mapping):
        return ExperienceRecord()
    try:
        return ExperienceRecord.model_validate(dict(record))
    except ValidationError as exc:
        logger.debug("Unusable experience record (%s): %s", record.get("id"), exc)
        return ExperienceRecord()


def _text_or(value: str | None, default: str) -> str:
    if value is None:
        return default
    return value if value.strip() else default


def outcome_of(record: RecordLike | None) -> str:
    exp = coerce_record(record)
    outcome = exp.outcome
    if isinstance(outcome, ExperienceOutcome):
        return _text_or(outcome.result, UNKNOWN)
    if isinstance(outcome, str):
        return _text_or(outcome, UNKNOWN)
    return UNKNOWN


def level_of(record: RecordLike | None) -> str:
    meta = coerce_record(record).metadata
    if meta is None:
        return UNKNOWN
    return _text_or(meta.position_level, UNKNOWN)


def post_type_of(record: RecordLike | None) -> str:
    meta = coerce_record(record).metadata
    if meta is None:
        return UNKNOWN
    return _text_or(meta.post_type, UNKNOWN)


def title_of(record: RecordLike | None) -> str:
    """Display title: metadata title, then source title, then folder/id."""

    exp = coerce_record(record)
    if exp.metadata is not None and exp.metadata.title:
        return exp.metadata.title
    if exp.source_meta is not None and exp.source_meta.source_title:
        return exp.source_meta.source_title
    return exp.folder or exp.id or UNTITLED


def source_url_of(record: RecordLike | None) -> str | None:
    meta = coerce_record(record).source_meta
    return (meta.source_url or None) if meta is not None else None


def date_of(record: RecordLike | None) -> str | None:
    meta = coerce_record(record).source_meta
    return (meta.source_date or None) if meta is not None else None


def format_experience_date(value: str | None) -> str:
    """Render a raw source date as e.g. ``Jan 5, 2024``.

    Missing dates become "Unknown date"; anything the parser rejects is
    returned as-is.
    """
    if not value or not value.strip():
        return UNKNOWN_DATE
    try:
        parsed = date_parser.parse(value, default=_DATE_DEFAULT)
    except (ValueError, OverflowError, TypeError):
        return value
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def normalize_experience(record: RecordLike | None) -> NormalizedExperience:
    exp = coerce_record(record)
    raw_date = date_of(exp)
    return NormalizedExperience(
        id=exp.id or exp.folder or "",
        folder=exp.folder,
        title=title_of(exp),
        outcome=outcome_of(exp),
        level=level_of(exp),
        post_type=post_type_of(exp),
        source_url=source_url_of(exp),
        source_date=raw_date,
        display_date=format_experience_date(raw_date),
        summary=exp.summary or "",
        overall_difficulty=exp.overall_difficulty,
    )


__all__ = [
    "UNKNOWN",
    "UNKNOWN_DATE",
    "UNTITLED",
    "coerce_record",
    "date_of",
    "format_experience_date",
    "level_of",
    "normalize_experience",
    "outcome_of",
    "post_type_of",
    "source_url_of",
    "title_of",
]
