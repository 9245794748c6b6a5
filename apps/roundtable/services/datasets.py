"""Loading of the static JSON datasets.

Primary datasets (questions, experiences, problems, companies) raise
`DatasetUnavailableError` when missing or malformed. The generated-problems
index is optional: any failure is logged and treated as "no generated
problems".
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from roundtable.core.exceptions import ConfigurationError, DatasetUnavailableError
from roundtable.core.settings import Settings
from roundtable.schemas.companies import CompaniesDataset, CompanyProfile
from roundtable.schemas.experiences import ExperiencesDataset
from roundtable.schemas.practice import GeneratedProblem, ProblemsDataset
from roundtable.schemas.questions import QuestionsDataset
from roundtable.schemas.solutions import SolutionManifest
from roundtable.services.solution_manifest import build_solution_manifest

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


@dataclass
class DatasetLoader:
    """Resolves dataset files under a data directory and validates them."""

    data_dir: Path
    questions_file: str = "questions.json"
    experiences_file: str = "experiences.json"
    generated_problems_file: str = "generated_problems.json"
    problems_file: str = "all_problems.json"
    companies_file: str = "companies.json"
    solutions_dir: str = "practice_solutions"

    @classmethod
    def from_settings(cls, settings: Settings) -> DatasetLoader:
        data_dir = Path(settings.data_dir)
        if not data_dir.is_dir():
            raise ConfigurationError(
                "DATA_DIR is not a directory",
                code="invalid_data_dir",
                details={"data_dir": str(data_dir)},
            )
        return cls(
            data_dir=data_dir,
            questions_file=settings.questions_file,
            experiences_file=settings.experiences_file,
            generated_problems_file=settings.generated_problems_file,
            problems_file=settings.problems_file,
            companies_file=settings.companies_file,
            solutions_dir=settings.solutions_dir,
        )

    def path(self, name: str) -> Path:
        candidate = Path(name)
        return candidate if candidate.is_absolute() else self.data_dir / candidate

    # ------------------------------------------------------------------
    # Primary datasets
    # ------------------------------------------------------------------
    def load_questions(self) -> QuestionsDataset:
        return self._load_model(self.questions_file, QuestionsDataset, label="questions")

    def load_experiences(self) -> ExperiencesDataset:
        return self._load_model(self.experiences_file, ExperiencesDataset, label="experiences")

    def load_problems(self) -> ProblemsDataset:
        return self._load_model(self.problems_file, ProblemsDataset, label="practice problems")

    def load_companies(self) -> list[CompanyProfile]:
        path = self.path(self.companies_file)
        payload = self._read(path, label="companies")
        # Either a bare list of profiles or {"companies": [...]}.
        if isinstance(payload, list):
            payload = {"companies": payload}
        return self._validate(CompaniesDataset, payload, path, label="companies").companies

    def solution_manifest(self) -> SolutionManifest:
        return build_solution_manifest(self.path(self.solutions_dir))

    # ------------------------------------------------------------------
    # Optional datasets
    # ------------------------------------------------------------------
    def load_generated_problems(self) -> list[GeneratedProblem]:
        path = self.path(self.generated_problems_file)
        try:
            payload = read_json(path)
        except (OSError, ValueError) as exc:
            logger.info("Generated problems unavailable (%s): %s", path, exc)
            return []

        items = payload.get("problems") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            return []
        problems: list[GeneratedProblem] = []
        for item in items:
            try:
                problems.append(GeneratedProblem.model_validate(item))
            except ValidationError:
                logger.debug("Skipping generated problem without id: %r", item)
        return problems

    def load_generated_problem_ids(self) -> frozenset[str]:
        return frozenset(p.id for p in self.load_generated_problems())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _read(self, path: Path, *, label: str) -> Any:
        try:
            return read_json(path)
        except (OSError, ValueError) as exc:
            logger.error("Failed to load %s data from %s: %s", label, path, exc)
            raise DatasetUnavailableError(
                f"Failed to load {label} data", details={"path": str(path)}
            ) from exc

    def _validate(self, model: type[ModelT], payload: Any, path: Path, *, label: str) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            logger.error("Invalid %s data in %s: %s", label, path, exc)
            raise DatasetUnavailableError(
                f"Failed to load {label} data",
                details={"path": str(path), "errors": exc.error_count()},
            ) from exc

    def _load_model(self, name: str, model: type[ModelT], *, label: str) -> ModelT:
        path = self.path(name)
        dataset = self._validate(model, self._read(path, label=label), path, label=label)
        logger.info("Loaded %s data from %s", label, path)
        return dataset


__all__ = ["DatasetLoader", "read_json"]
