from __future__ import annotations

from roundtable.schemas.questions import QuestionOccurrence, QuestionSource
from roundtable.services.round_buckets import (
    build_questions_dataset,
    build_round_buckets,
    group_round_occurrences,
    occurrences_from_experiences,
)


def _occ(qid: str, source: str, round_number: int, **kw) -> QuestionOccurrence:
    kw.setdefault("name", f"Question {qid}")
    kw.setdefault("category", "Arrays")
    kw.setdefault("round_name", f"Round {round_number}")
    return QuestionOccurrence(id=qid, source_id=source, round_number=round_number, **kw)


def _occurrences() -> list[QuestionOccurrence]:
    return [
        _occ("q1", "e1", 1, variation_text="Reverse a linked list", difficulty="easy"),
        _occ("q1", "e2", 1, variation_text="Reverse a linked list", difficulty="medium"),
        _occ("q2", "e1", 1, category="Graphs"),
        _occ("q1", "e3", 3, variation_text="Reverse a list in place", follow_ups=["Recursively?"]),
        _occ("q3", "e3", 3, category="Design"),
    ]


def test_group_round_occurrences_dedupes_by_value():
    grouped = group_round_occurrences(
        [
            _occ("q1", "e1", 1, variation_text="v", gotchas=["null head"]),
            _occ("q1", "e1", 1, variation_text="v", gotchas=["null head", "cycle"]),
            _occ("q1", "e2", 1, variation_text="w"),
        ]
    )
    assert len(grouped) == 1
    q = grouped[0]
    assert q.sources == [
        QuestionSource(id="e1", round_name="Round 1"),
        QuestionSource(id="e2", round_name="Round 1"),
    ]
    assert q.variations == ["v", "w"]
    assert q.gotchas == ["null head", "cycle"]


def test_round_buckets_count_common_and_unique():
    buckets = build_round_buckets(_occurrences())

    assert set(buckets) == {"1", "3"}
    r1, r3 = buckets["1"], buckets["3"]
    assert (r1.total, r1.common_patterns, r1.unique_questions) == (2, 1, 1)
    assert (r3.total, r3.common_patterns, r3.unique_questions) == (2, 1, 1)
    assert [q.id for q in r1.questions] == ["q1", "q2"]
    assert r1.questions[0].difficulties == ["easy", "medium"]


def test_rounds_outside_range_are_ignored():
    buckets = build_round_buckets([_occ("q1", "e1", 7)])
    assert buckets == {}


def test_build_questions_dataset_stats_and_leaderboard():
    ds = build_questions_dataset(_occurrences(), generated_at="2024-05-01T00:00:00Z")

    assert ds.generated_at == "2024-05-01T00:00:00Z"
    assert ds.total_experiences == 3
    assert ds.categories == ["Arrays", "Design", "Graphs"]
    assert ds.stats.total_questions == 3
    assert [(r.round, r.total, r.common, r.unique) for r in ds.stats.by_round] == [
        (1, 2, 1, 1),
        (3, 2, 1, 1),
    ]

    top = ds.top_questions[0]
    assert top.id == "q1"
    assert top.count == 3
    assert top.rounds == [1, 3]


def test_top_questions_truncated():
    ds = build_questions_dataset(_occurrences(), top_n=1)
    assert [t.id for t in ds.top_questions] == ["q1"]


def test_explicit_total_experiences_wins():
    ds = build_questions_dataset(_occurrences(), total_experiences=42)
    assert ds.total_experiences == 42


def test_dataset_serializes_with_camel_case_keys():
    payload = build_questions_dataset(_occurrences()).model_dump(by_alias=True)
    assert {"generatedAt", "totalExperiences", "topQuestions", "rounds"} <= set(payload)
    bucket = payload["rounds"]["1"]
    assert {"commonPatterns", "uniqueQuestions"} <= set(bucket)
    assert bucket["questions"][0]["sources"][0] == {"id": "e1", "roundName": "Round 1"}


def test_occurrences_from_experiences_skips_unclassified():
    records = [
        {
            "id": "exp-1",
            "rounds": [
                {
                    "round_number": "2",
                    "name": "Technical Phone Screen",
                    "questions": [
                        {
                            "id": "q1",
                            "category": "Linked Lists",
                            "name": "Reverse Linked List",
                            "question": "Reverse a singly linked list",
                            "topic": "Linked Lists",
                            "follow_ups": ["Do it recursively"],
                        },
                        {"question": "Tell me about yourself"},
                    ],
                },
                {"round_number": None, "questions": [{"id": "q9", "category": "X"}]},
            ],
        },
        {
            "folder": "exp-2",
            "rounds": [
                {"round_number": 1, "questions": [{"id": "q1", "category": "Linked Lists"}]}
            ],
        },
        "not a record",
    ]

    occurrences = occurrences_from_experiences(records)

    assert [(o.id, o.source_id, o.round_number) for o in occurrences] == [
        ("q1", "exp-1", 2),
        ("q1", "exp-2", 1),
    ]
    first = occurrences[0]
    assert first.round_name == "Technical Phone Screen"
    assert first.variation_text == "Reverse a singly linked list"
    assert first.follow_ups == ["Do it recursively"]
    assert first.topics == ["Linked Lists"]
    assert occurrences[1].round_name == "Round 1"
