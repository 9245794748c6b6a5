from __future__ import annotations

import pytest
from roundtable.schemas.experiences import ExperiencesDataset
from roundtable.services.experience_store import ExperienceStore, is_accepted


def _record(rid: str, outcome, post_type: str = "experience", level: str = "Senior", **kw):
    record = {
        "id": rid,
        "folder": f"folder-{rid}",
        "metadata": {"title": f"Title {rid}", "post_type": post_type, "position_level": level},
        "outcome": outcome,
    }
    record.update(kw)
    return record


@pytest.fixture
def store() -> ExperienceStore:
    dataset = ExperiencesDataset(
        company="Acme",
        experiences=[
            _record("1", {"result": "Accepted"}, summary="Great onsite about graphs"),
            _record("2", "rejected", level="Staff"),
            _record("3", {"result": "Offer extended"}, post_type="question_share"),
            _record("4", "pending", post_type="help_request", level="Junior"),
            _record(
                "5",
                None,
                coding_questions=[
                    {"question": "Implement an LRU cache", "topic": "Design", "round": "Onsite 2"},
                    {"question": "Two sum", "topic": "Arrays"},
                    {"question": "Serialize a binary tree", "from_round": "Phone"},
                ],
            ),
        ],
    )
    return ExperienceStore(dataset)


def test_get_by_id_or_folder(store: ExperienceStore):
    assert store.get("2").id == "2"
    assert store.get("folder-3").id == "3"
    assert store.get("missing") is None


def test_filter_all_is_noop(store: ExperienceStore):
    assert len(store.filter(outcome="all", level="ALL", post_type="", search="")) == 5


def test_filter_by_outcome_level_post_type(store: ExperienceStore):
    assert [e.id for e in store.filter(outcome="reject")] == ["2"]
    assert [e.id for e in store.filter(level="staff")] == ["2"]
    assert [e.id for e in store.filter(post_type="help")] == ["4"]
    assert [e.id for e in store.filter(outcome="accept", level="senior")] == ["1"]


def test_search_matches_title_or_summary(store: ExperienceStore):
    assert [e.id for e in store.filter(search="GRAPHS")] == ["1"]
    assert [e.id for e in store.filter(search="title 4")] == ["4"]


def test_unique_values_are_sorted(store: ExperienceStore):
    assert store.unique_outcomes() == [
        "Accepted",
        "Offer extended",
        "pending",
        "rejected",
        "unknown",
    ]
    assert store.unique_levels() == ["Junior", "Senior", "Staff"]
    assert store.unique_post_types() == ["experience", "help_request", "question_share"]


def test_actual_experiences_excludes_help_requests(store: ExperienceStore):
    assert [e.id for e in store.actual_experiences()] == ["1", "2", "3", "5"]


def test_pass_rate_counts_accepted_and_offers(store: ExperienceStore):
    # 2 of 5
    assert store.pass_rate() == 40


def test_pass_rate_rounds_half_up():
    dataset = ExperiencesDataset(
        experiences=[_record(str(i), "accepted" if i < 1 else "rejected") for i in range(8)]
    )
    # 12.5 -> 13
    assert ExperienceStore(dataset).pass_rate() == 13


def test_pass_rate_empty_dataset():
    assert ExperienceStore(ExperiencesDataset()).pass_rate() == 0


def test_coding_questions_flattened_with_defaults(store: ExperienceStore):
    questions = store.coding_questions()
    assert [q.question for q in questions] == [
        "Implement an LRU cache",
        "Serialize a binary tree",
    ]
    lru, tree = questions
    assert lru.round == "Onsite 2"
    assert lru.experience_id == "5"
    assert lru.experience_title == "Title 5"
    assert tree.topic == "Unknown"
    assert tree.difficulty == "unknown"
    assert tree.round == "Phone"


def test_statistics(store: ExperienceStore):
    stats = store.statistics()
    assert stats.total == 5
    assert stats.actual_experiences == 4
    assert stats.outcomes.accepted == 2
    assert stats.outcomes.rejected == 1
    assert stats.outcomes.pending == 0
    assert stats.outcomes.unknown == 1
    assert stats.pass_rate == 40
    assert stats.coding_questions == 2


def test_by_outcome(store: ExperienceStore):
    assert [e.id for e in store.by_outcome("OFFER")] == ["3"]


def test_is_accepted():
    assert is_accepted("Accepted")
    assert is_accepted("Got an offer")
    assert not is_accepted("rejected")


def test_normalized_rows_are_cached_copies(store: ExperienceStore):
    rows = store.normalized()
    rows.clear()
    assert len(store.normalized()) == 5
