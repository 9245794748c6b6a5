from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from roundtable.schemas.companies import (
    CompanyCodingQuestion,
    CompanyProfile,
    CompanyStats,
    CompanySummary,
)
from roundtable.schemas.experiences import NormalizedExperience
from roundtable.services.experience_accessors import normalize_experience, title_of
from roundtable.services.experience_store import ExperienceStore

TOP_TOPICS = 5
RELATED_EXPERIENCES_LIMIT = 10
DIFFICULTY_LEVELS = ("easy", "medium", "hard")


def company_slug(name: str) -> str:
    return name.strip().lower()


def main_topic(topic: str) -> str:
    """`"Graphs / BFS"` -> `"Graphs"`."""
    return topic.split("/")[0].strip()


def company_stats(company: CompanyProfile) -> CompanyStats:
    # "Graphs / BFS" and "Graphs" count toward the same topic.
    topics = Counter(main_topic(q.topic) for q in company.coding_questions)
    ranked = [topic for topic, _count in topics.most_common()]
    return CompanyStats(
        total_questions=(
            len(company.coding_questions)
            + len(company.system_design_questions)
            + len(company.behavioral_questions)
        ),
        coding_questions=len(company.coding_questions),
        system_design=len(company.system_design_questions),
        behavioral=len(company.behavioral_questions),
        avg_difficulty=company.overall_difficulty,
        top_topics=ranked[:TOP_TOPICS],
        total_rounds=len(company.rounds),
    )


def coding_topics(company: CompanyProfile) -> list[str]:
    """Distinct main topics in first-seen order."""
    return list(dict.fromkeys(main_topic(q.topic) for q in company.coding_questions))


def filter_coding_questions(
    company: CompanyProfile,
    topic: str | None = None,
    difficulty: str | None = None,
) -> list[CompanyCodingQuestion]:
    """Topic is a (case-sensitive) substring of the question topic; difficulty is exact.

    Empty or missing values do not filter.
    """
    return [
        q
        for q in company.coding_questions
        if (not topic or topic in q.topic) and (not difficulty or q.difficulty == difficulty)
    ]


@dataclass
class CompanyDirectory:
    companies: list[CompanyProfile]

    def all(self) -> list[CompanyProfile]:
        return list(self.companies)

    def by_slug(self, slug: str) -> CompanyProfile | None:
        wanted = company_slug(slug)
        return next((c for c in self.companies if company_slug(c.company) == wanted), None)

    def stats(self, company: CompanyProfile) -> CompanyStats:
        return company_stats(company)

    def related_experiences(
        self,
        company: CompanyProfile,
        store: ExperienceStore,
        limit: int = RELATED_EXPERIENCES_LIMIT,
    ) -> list[NormalizedExperience]:
        """Experiences whose title or folder mentions the company, case-insensitively."""

        name = company.company.lower()
        related: list[NormalizedExperience] = []
        for exp in store.all():
            if len(related) >= limit:
                break
            if name in title_of(exp).lower() or name in (exp.folder or "").lower():
                related.append(normalize_experience(exp))
        return related

    def summaries(self) -> list[CompanySummary]:
        return [
            CompanySummary(
                company=c.company,
                slug=company_slug(c.company),
                overall_difficulty=c.overall_difficulty,
                stats=self.stats(c),
            )
            for c in self.companies
        ]


__all__ = [
    "CompanyDirectory",
    "DIFFICULTY_LEVELS",
    "coding_topics",
    "company_slug",
    "company_stats",
    "filter_coding_questions",
    "main_topic",
]
