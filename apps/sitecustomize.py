"""Early bootstrapping for Roundtable when `apps/` is on `sys.path`.

This module is imported automatically by Python at startup if found on
`sys.path` (see the `site` module). We use it to load environment variables
from `.env` files (package-local first, then repo root) so scripts see the
same `DATA_DIR` and file overrides as the API.

Guarded by `ROUNDTABLE_ENV_LOADED` so repeated imports do not reload `.env`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import load_dotenv


def _load_env_once() -> None:
    if os.environ.get("ROUNDTABLE_ENV_LOADED") == "1":
        return
    # Unit tests must not pick up a developer's local data overrides.
    if (os.environ.get("APP_ENV") or "").strip().lower() in {"test", "ci"}:
        os.environ["ROUNDTABLE_ENV_LOADED"] = "1"
        return

    apps_dir = Path(__file__).resolve().parent
    pkg_env = apps_dir / "roundtable" / ".env"
    root_env = apps_dir.parent / ".env"

    if pkg_env.exists():
        load_dotenv(pkg_env)
    elif root_env.exists():
        load_dotenv(root_env)
    os.environ["ROUNDTABLE_ENV_LOADED"] = "1"


def _set_no_pyc() -> None:
    if os.environ.get("PYTHONDONTWRITEBYTECODE") == "1":
        sys.dont_write_bytecode = True


_load_env_once()
_set_no_pyc()
