from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    """Unified application settings for Roundtable.

    Loads from env with support for repo ".env" files. Avoids manual load_dotenv().
    """

    _app_env = (os.getenv("APP_ENV") or "").strip().lower()
    _env_files = (
        []
        if _app_env in {"test", "ci"}
        else [
            str((Path(__file__).resolve().parents[1] / ".env")),  # apps/roundtable/.env
            str((Path(__file__).resolve().parents[3] / ".env")),  # repo root .env
        ]
    )

    model_config = SettingsConfigDict(
        env_file=_env_files,
        case_sensitive=False,
        extra="ignore",
    )

    # --- App / Core ---
    app_env: str = Field(default="dev", alias="APP_ENV")
    app_name: str = Field(default="roundtable", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    # Logging
    log_level: str | None = Field(default=None, alias="ROUNDTABLE_LOG_LEVEL")
    log_level_fallback: str | None = Field(default=None, alias="LOG_LEVEL")

    cors_allow_origins: list[str] = Field(default=["*"], alias="CORS_ALLOW_ORIGINS")

    # --- Datasets ---
    data_dir: Path = Field(default=DEFAULT_DATA_DIR, alias="DATA_DIR")
    questions_file: str = Field(default="questions.json", alias="QUESTIONS_FILE")
    experiences_file: str = Field(default="experiences.json", alias="EXPERIENCES_FILE")
    generated_problems_file: str = Field(
        default="generated_problems.json", alias="GENERATED_PROBLEMS_FILE"
    )
    problems_file: str = Field(default="all_problems.json", alias="PROBLEMS_FILE")
    companies_file: str = Field(default="companies.json", alias="COMPANIES_FILE")
    solutions_dir: str = Field(default="practice_solutions", alias="SOLUTIONS_DIR")
    solution_manifest_file: str = Field(
        default="solution_manifest.json", alias="SOLUTION_MANIFEST_FILE"
    )

    # Leaderboard size when rebuilding questions.json
    top_questions_limit: int = Field(default=20, alias="TOP_QUESTIONS_LIMIT", ge=1, le=500)

    @property
    def effective_log_level(self) -> str | None:
        return self.log_level or self.log_level_fallback


@lru_cache()
def get_settings() -> Settings:
    return Settings()


# Convenience singleton for modules still expecting a module-level "settings"
settings = get_settings()
