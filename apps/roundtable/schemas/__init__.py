"""Pydantic schemas shared across the app."""

from .experiences import ExperienceRecord, ExperiencesDataset, NormalizedExperience
from .questions import (
    Question,
    QuestionOccurrence,
    QuestionsDataset,
    QuestionSource,
    RoundBucket,
)
from .solutions import SolutionInfo, SolutionManifest

__all__ = [
    # Questions
    "Question",
    "QuestionOccurrence",
    "QuestionSource",
    "QuestionsDataset",
    "RoundBucket",
    # Experiences
    "ExperienceRecord",
    "ExperiencesDataset",
    "NormalizedExperience",
    # Solutions
    "SolutionInfo",
    "SolutionManifest",
]
