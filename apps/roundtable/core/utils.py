from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""

    return datetime.now(timezone.utc)


def utcnow_iso() -> str:
    """ISO-8601 timestamp with a trailing `Z`, matching the generated datasets."""

    return utcnow().isoformat().replace("+00:00", "Z")


def contains_ci(haystack: Any, needle: str) -> bool:
    """Case-insensitive substring test that tolerates non-string haystacks."""

    if not isinstance(haystack, str):
        return False
    return needle.lower() in haystack.lower()


__all__ = ["contains_ci", "utcnow", "utcnow_iso"]
