from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class QuestionSource(BaseModel):
    """Where a question was asked: one (experience, round) pair."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Experience identifier the question came from")
    round_name: str = Field(
        ..., alias="roundName", description="Round label within that experience"
    )


class QuestionOccurrence(BaseModel):
    """One appearance of a question inside one round of one experience."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Stable key shared across occurrences of the same question")
    name: str
    category: str
    source_id: str = Field(..., alias="sourceId")
    round_name: str = Field(..., alias="roundName")
    round_number: int = Field(..., alias="roundNumber", ge=1)
    variation_text: Optional[str] = Field(default=None, alias="variationText")
    follow_ups: List[str] = Field(default_factory=list, alias="followUps")
    gotchas: List[str] = Field(default_factory=list)
    difficulty: Optional[str] = None
    leetcode_similar: List[str] = Field(default_factory=list, alias="leetcodeSimilar")
    topics: List[str] = Field(default_factory=list)
    approach: Optional[str] = None


class Question(BaseModel):
    """A logical question merged across every round that asked it."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    category: str
    sources: List[QuestionSource] = Field(default_factory=list)
    variations: List[str] = Field(default_factory=list)
    follow_ups: List[str] = Field(default_factory=list, alias="followUps")
    gotchas: List[str] = Field(default_factory=list)
    difficulties: List[str] = Field(default_factory=list)
    leetcode_similar: List[str] = Field(default_factory=list, alias="leetcodeSimilar")
    approaches: List[str] = Field(default_factory=list)
    topics: List[str] = Field(default_factory=list)

    @property
    def popularity(self) -> int:
        """Number of distinct (experience, round) pairs that asked this question."""
        return len(self.sources)


class RoundBucket(BaseModel):
    """Precomputed totals and questions for one numbered round."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = 0
    common_patterns: int = Field(default=0, alias="commonPatterns")
    unique_questions: int = Field(default=0, alias="uniqueQuestions")
    questions: List[Question] = Field(default_factory=list)


class TopQuestion(BaseModel):
    id: str
    name: str
    category: str
    count: int
    rounds: List[int] = Field(default_factory=list)


class RoundStats(BaseModel):
    round: int
    total: int
    common: int
    unique: int


class QuestionStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_questions: int = Field(default=0, alias="totalQuestions")
    by_round: List[RoundStats] = Field(default_factory=list, alias="byRound")


class QuestionsDataset(BaseModel):
    """The `questions.json` document produced at data-preparation time."""

    model_config = ConfigDict(populate_by_name=True)

    generated_at: Optional[str] = Field(default=None, alias="generatedAt")
    total_experiences: int = Field(default=0, alias="totalExperiences")
    categories: List[str] = Field(default_factory=list)
    top_questions: List[TopQuestion] = Field(default_factory=list, alias="topQuestions")
    stats: QuestionStats = Field(default_factory=QuestionStats)
    rounds: dict[str, RoundBucket] = Field(
        default_factory=dict, description="Round buckets keyed by round number as a string"
    )


class CatalogQuestion(Question):
    """A query result row, annotated for the presentation layer."""

    has_generated_problem: bool = Field(default=False, alias="hasGeneratedProblem")
    asked_count: int = Field(default=0, alias="askedCount")


class QuestionQueryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    round: str
    category: str
    query: str
    total: int
    questions: List[CatalogQuestion]


class QuestionStatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    generated_at: Optional[str] = Field(default=None, alias="generatedAt")
    total_experiences: int = Field(default=0, alias="totalExperiences")
    stats: QuestionStats
    top_questions: List[TopQuestion] = Field(default_factory=list, alias="topQuestions")


class RoundSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    round: int
    total: int
    common_patterns: int = Field(alias="commonPatterns")
    unique_questions: int = Field(alias="uniqueQuestions")
