from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from roundtable.schemas.experiences import NormalizedExperience


class CompanyCodingQuestion(BaseModel):
    model_config = ConfigDict(extra="allow")

    question: str
    topic: str = ""
    difficulty: Optional[str] = None
    round: Optional[str] = None
    leetcode_similar: Optional[str] = None
    approach_hint: Optional[str] = None
    subtopics: List[str] = Field(default_factory=list)
    follow_ups: List[str] = Field(default_factory=list)
    gotchas: List[str] = Field(default_factory=list)


class CompanySystemDesignQuestion(BaseModel):
    model_config = ConfigDict(extra="allow")

    question: str
    key_components: List[str] = Field(default_factory=list)
    scale: Optional[str] = None


class CompanyBehavioralQuestion(BaseModel):
    model_config = ConfigDict(extra="allow")

    question: str
    what_they_look_for: str = ""


class CompanyRound(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    type: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None
    questions: List[str] = Field(default_factory=list)
    skills_tested: List[str] = Field(default_factory=list)
    difficulty: Optional[str] = None
    tips: Optional[str] = None


class CompanyInterviewProcess(BaseModel):
    model_config = ConfigDict(extra="allow")

    total_rounds: Optional[str] = None
    round_types: List[str] = Field(default_factory=list)
    typical_timeline: Optional[str] = None


class CompanyPreparation(BaseModel):
    model_config = ConfigDict(extra="allow")

    focus_topics: List[str] = Field(default_factory=list)
    recommended_problems: List[str] = Field(default_factory=list)
    resources: List[str] = Field(default_factory=list)
    time_needed: Optional[str] = None


class CompanyProfile(BaseModel):
    """Curated interview profile for one company."""

    model_config = ConfigDict(extra="allow")

    company: str
    interview_process: CompanyInterviewProcess = Field(default_factory=CompanyInterviewProcess)
    rounds: List[CompanyRound] = Field(default_factory=list)
    coding_questions: List[CompanyCodingQuestion] = Field(default_factory=list)
    system_design_questions: List[CompanySystemDesignQuestion] = Field(default_factory=list)
    behavioral_questions: List[CompanyBehavioralQuestion] = Field(default_factory=list)
    success_tips: List[str] = Field(default_factory=list)
    mistakes_to_avoid: List[str] = Field(default_factory=list)
    preparation: CompanyPreparation = Field(default_factory=CompanyPreparation)
    overall_difficulty: str = "unknown"
    pass_rate_estimate: Optional[str] = None
    summary: Optional[str] = None


class CompaniesDataset(BaseModel):
    companies: List[CompanyProfile] = Field(default_factory=list)


class CompanyStats(BaseModel):
    total_questions: int
    coding_questions: int
    system_design: int
    behavioral: int
    avg_difficulty: str
    top_topics: List[str] = Field(default_factory=list)
    total_rounds: int


class CompanySummary(BaseModel):
    company: str
    slug: str
    overall_difficulty: str
    stats: CompanyStats


class CompanyDetail(BaseModel):
    profile: CompanyProfile
    stats: CompanyStats
    topics: List[str] = Field(default_factory=list, description="Distinct main coding topics")
    difficulties: List[str] = Field(default_factory=list)
    coding_questions: List[CompanyCodingQuestion] = Field(
        default_factory=list, description="Coding questions after the topic/difficulty filter"
    )
    related_experiences: List[NormalizedExperience] = Field(default_factory=list)
