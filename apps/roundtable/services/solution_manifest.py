from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from roundtable.core.exceptions import SolutionsUnavailableError
from roundtable.core.utils import utcnow_iso
from roundtable.schemas.solutions import SolutionInfo, SolutionManifest

logger = logging.getLogger(__name__)

# <problemId>_main.json or <problemId>_part<N>.json
SOLUTION_FILE_RE = re.compile(r"^(.+?)_(main|part\d+)\.json$")


def parse_solution_filename(name: str) -> tuple[str, int | None] | None:
    """Return `(problem_id, part)` where part is None for the main solution."""

    if name == "temp" or name.startswith("."):
        return None
    match = SOLUTION_FILE_RE.match(name)
    if not match:
        return None
    problem_id, kind = match.groups()
    if kind == "main":
        return problem_id, None
    return problem_id, int(kind[len("part") :])


def build_solution_manifest(directory: str | Path) -> SolutionManifest:
    """Scan a solutions directory and describe which problems have which files."""

    path = Path(directory)
    try:
        names = sorted(p.name for p in path.iterdir() if p.name.endswith(".json"))
    except OSError as exc:
        logger.warning("Failed to read solutions directory %s: %s", path, exc)
        raise SolutionsUnavailableError("Failed to read solutions directory") from exc

    solutions: dict[str, SolutionInfo] = {}
    for name in names:
        parsed = parse_solution_filename(name)
        if parsed is None:
            continue
        problem_id, part = parsed
        info = solutions.setdefault(problem_id, SolutionInfo())
        if part is None:
            info.main = True
        elif part not in info.parts:
            info.parts.append(part)

    for info in solutions.values():
        info.parts.sort()

    return SolutionManifest(
        generated_at=utcnow_iso(),
        total_with_solutions=len(solutions),
        solutions=solutions,
    )


def write_solution_manifest(manifest: SolutionManifest, output: str | Path) -> Path:
    out = Path(output)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(manifest.model_dump(mode="json"), indent=2), encoding="utf-8")
    return out


__all__ = [
    "SOLUTION_FILE_RE",
    "build_solution_manifest",
    "parse_solution_filename",
    "write_solution_manifest",
]
