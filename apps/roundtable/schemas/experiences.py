from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _mapping_or_none(value: Any) -> Any:
    return value if isinstance(value, dict) else None


def _dict_items(value: Any) -> list[Any]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _str_items(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None and str(item).strip()]


def _optional_str(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)


class _Loose(BaseModel):
    """Legacy records carry arbitrary extra keys; keep them around."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ExperienceMetadata(_Loose):
    title: Optional[str] = None
    post_type: Optional[str] = None
    position_level: Optional[str] = None
    location: Optional[str] = None
    yoe: Optional[str] = None
    application_source: Optional[str] = None
    interview_date: Optional[str] = None
    team_department: Optional[str] = None
    compensation: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _scalars_only(cls, value: Any) -> Optional[str]:
        return _optional_str(value)


class ExperienceOutcome(_Loose):
    """Structured outcome; older records store a bare string instead."""

    result: Optional[str] = None
    time_to_response: Optional[str] = None
    feedback_received: Optional[str] = None
    rejection_reasons: List[str] = Field(default_factory=list)

    @field_validator("result", "time_to_response", "feedback_received", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return _optional_str(value)

    @field_validator("rejection_reasons", mode="before")
    @classmethod
    def _reasons(cls, value: Any) -> list[str]:
        return _str_items(value)


class ExperienceSourceMeta(_Loose):
    source_title: Optional[str] = None
    source_url: Optional[str] = None
    source_author: Optional[str] = None
    source_date: Optional[str] = None
    analyzed_at: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _scalars_only(cls, value: Any) -> Optional[str]:
        return _optional_str(value)


class ExperienceRoundQuestion(_Loose):
    """A question as recorded inside one experience round.

    `id` and `category` are only present once an upstream classifier has
    assigned the question to a canonical catalog entry.
    """

    id: Optional[str] = None
    category: Optional[str] = None
    name: Optional[str] = None
    question: str = ""
    topic: Optional[str] = None
    difficulty: Optional[str] = None
    follow_ups: List[str] = Field(default_factory=list)
    approach: Optional[str] = None
    leetcode_similar: List[str] = Field(default_factory=list)
    gotchas: List[str] = Field(default_factory=list)
    topics: List[str] = Field(default_factory=list)

    @field_validator("id", "category", "name", "topic", "difficulty", "approach", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return _optional_str(value)

    @field_validator("question", mode="before")
    @classmethod
    def _question(cls, value: Any) -> str:
        return _optional_str(value) or ""

    @field_validator("follow_ups", "leetcode_similar", "gotchas", "topics", mode="before")
    @classmethod
    def _lists(cls, value: Any) -> list[str]:
        return _str_items(value)


class ExperienceRound(_Loose):
    round_number: Optional[int] = None
    name: Optional[str] = None
    type: Optional[str] = None
    duration: Optional[str] = None
    difficulty: Optional[str] = None
    questions: List[ExperienceRoundQuestion] = Field(default_factory=list)
    tips: Optional[str] = None
    verdict: Optional[str] = None

    @field_validator("round_number", mode="before")
    @classmethod
    def _round_number(cls, value: Any) -> Optional[int]:
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @field_validator("name", "type", "duration", "difficulty", "tips", "verdict", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return _optional_str(value)

    @field_validator("questions", mode="before")
    @classmethod
    def _questions(cls, value: Any) -> list[Any]:
        return _dict_items(value)


class ExperienceCodingQuestion(_Loose):
    question: str = ""
    topic: Optional[str] = None
    subtopics: List[str] = Field(default_factory=list)
    difficulty: Optional[str] = None
    round: Optional[str] = None
    from_round: Optional[str] = None
    follow_ups: List[str] = Field(default_factory=list)
    approach: Optional[str] = None
    leetcode_similar: Optional[str] = None
    gotchas: List[str] = Field(default_factory=list)

    @field_validator(
        "topic", "difficulty", "round", "from_round", "approach", "leetcode_similar", mode="before"
    )
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return _optional_str(value)

    @field_validator("question", mode="before")
    @classmethod
    def _question(cls, value: Any) -> str:
        return _optional_str(value) or ""

    @field_validator("subtopics", "follow_ups", "gotchas", mode="before")
    @classmethod
    def _lists(cls, value: Any) -> list[str]:
        return _str_items(value)


class ExperienceRecord(_Loose):
    """One interview experience as stored in `experiences.json`.

    Shapes vary between the legacy and current export formats: `outcome` may be
    a bare string or a structured object and `metadata` may be missing. Anything
    unusable degrades to `None`/empty instead of failing validation.
    """

    id: str = ""
    folder: Optional[str] = None
    metadata: Optional[ExperienceMetadata] = None
    outcome: Union[ExperienceOutcome, str, None] = None
    interview_process: Optional[Dict[str, Any]] = None
    rounds: List[ExperienceRound] = Field(default_factory=list)
    coding_questions: List[ExperienceCodingQuestion] = Field(default_factory=list)
    system_design: List[Dict[str, Any]] = Field(default_factory=list)
    behavioral: List[Dict[str, Any]] = Field(default_factory=list)
    key_learnings: List[str] = Field(default_factory=list)
    preparation_tips: List[str] = Field(default_factory=list)
    mistakes_made: List[str] = Field(default_factory=list)
    red_flags: List[str] = Field(default_factory=list)
    overall_difficulty: Optional[str] = None
    summary: Optional[str] = None
    source_meta: Optional[ExperienceSourceMeta] = Field(default=None, alias="_meta")

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value: Any) -> str:
        return _optional_str(value) or ""

    @field_validator("folder", "overall_difficulty", "summary", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return _optional_str(value)

    @field_validator("metadata", "interview_process", "source_meta", mode="before")
    @classmethod
    def _mapping(cls, value: Any) -> Any:
        return _mapping_or_none(value)

    @field_validator("outcome", mode="before")
    @classmethod
    def _outcome(cls, value: Any) -> Any:
        if isinstance(value, (str, dict)):
            return value
        return None

    @field_validator("rounds", "coding_questions", "system_design", "behavioral", mode="before")
    @classmethod
    def _records(cls, value: Any) -> list[Any]:
        return _dict_items(value)

    @field_validator(
        "key_learnings", "preparation_tips", "mistakes_made", "red_flags", mode="before"
    )
    @classmethod
    def _lists(cls, value: Any) -> list[str]:
        return _str_items(value)


class ExperienceDatasetStats(_Loose):
    total_experiences: int = 0
    outcomes: Dict[str, int] = Field(default_factory=dict)
    post_types: Dict[str, int] = Field(default_factory=dict)
    levels: Dict[str, int] = Field(default_factory=dict)
    difficulties: Dict[str, int] = Field(default_factory=dict)


class ExperiencesDataset(_Loose):
    """The per-company `experiences.json` document."""

    company: str = ""
    generated_at: Optional[str] = None
    stats: ExperienceDatasetStats = Field(default_factory=ExperienceDatasetStats)
    experiences: List[ExperienceRecord] = Field(default_factory=list)

    @field_validator("experiences", mode="before")
    @classmethod
    def _records(cls, value: Any) -> list[Any]:
        return _dict_items(value)


class NormalizedExperience(BaseModel):
    """Uniform scalar view of an experience, built once at the boundary."""

    id: str
    folder: Optional[str] = None
    title: str
    outcome: str
    level: str
    post_type: str
    source_url: Optional[str] = None
    source_date: Optional[str] = None
    display_date: str
    summary: str = ""
    overall_difficulty: Optional[str] = None


class CodingQuestionSummary(BaseModel):
    question: str
    topic: str
    difficulty: str
    round: str
    experience_id: str
    experience_title: str
    approach: Optional[str] = None
    leetcode_similar: Optional[str] = None
    gotchas: List[str] = Field(default_factory=list)
    follow_ups: List[str] = Field(default_factory=list)


class OutcomeBreakdown(BaseModel):
    accepted: int = 0
    rejected: int = 0
    pending: int = 0
    unknown: int = 0


class ExperienceStatistics(BaseModel):
    total: int
    actual_experiences: int
    outcomes: OutcomeBreakdown
    pass_rate: int
    coding_questions: int


class ExperienceFilterOptions(BaseModel):
    outcomes: List[str] = Field(default_factory=list)
    levels: List[str] = Field(default_factory=list)
    post_types: List[str] = Field(default_factory=list)


class ExperienceDetail(BaseModel):
    summary: NormalizedExperience
    record: Dict[str, Any]


class ExperienceListResponse(BaseModel):
    company: str
    total: int
    count: int
    experiences: List[NormalizedExperience]
