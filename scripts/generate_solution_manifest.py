#!/usr/bin/env python3
"""Write `solution_manifest.json` from the practice solutions directory.

Usage:
    python -m scripts.generate_solution_manifest [--solutions-dir DIR] [--output FILE]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from scripts._bootstrap import bootstrap

bootstrap()

from roundtable.core.exceptions import SolutionsUnavailableError  # noqa: E402
from roundtable.core.logging import setup_logging  # noqa: E402
from roundtable.core.settings import settings  # noqa: E402
from roundtable.services.solution_manifest import (  # noqa: E402
    build_solution_manifest,
    write_solution_manifest,
)

logger = logging.getLogger("scripts.generate_solution_manifest")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    data_dir = Path(settings.data_dir)
    p = argparse.ArgumentParser(description="Scan practice solutions and write the manifest")
    p.add_argument("--solutions-dir", type=Path, default=data_dir / settings.solutions_dir)
    p.add_argument("--output", type=Path, default=data_dir / settings.solution_manifest_file)
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    setup_logging(settings.effective_log_level)
    args = parse_args(argv)
    try:
        manifest = build_solution_manifest(args.solutions_dir)
    except SolutionsUnavailableError as exc:
        logger.error("%s: %s", exc.message, args.solutions_dir)
        return 1

    out = write_solution_manifest(manifest, args.output)
    with_main = sum(1 for info in manifest.solutions.values() if info.main)
    with_parts = sum(1 for info in manifest.solutions.values() if info.parts)
    logger.info("Generated manifest with %d problems -> %s", manifest.total_with_solutions, out)
    logger.info("  - %d with main solutions", with_main)
    logger.info("  - %d with follow-up solutions", with_parts)
    return 0


if __name__ == "__main__":
    sys.exit(main())
