from roundtable.schemas.experiences import ExperienceOutcome, ExperienceRecord


def test_outcome_union_keeps_both_shapes():
    structured = ExperienceRecord.model_validate({"outcome": {"result": "x"}})
    assert isinstance(structured.outcome, ExperienceOutcome)
    assert ExperienceRecord.model_validate({"outcome": "accepted"}).outcome == "accepted"
    assert ExperienceRecord.model_validate({"outcome": 3}).outcome is None


def test_malformed_fields_degrade_instead_of_failing():
    record = ExperienceRecord.model_validate(
        {
            "id": 17,
            "metadata": ["not", "a", "mapping"],
            "_meta": "nope",
            "rounds": [{"round_number": "two", "questions": "none"}, "junk"],
            "coding_questions": None,
            "key_learnings": "Practice graphs",
        }
    )
    assert record.id == "17"
    assert record.metadata is None
    assert record.source_meta is None
    assert len(record.rounds) == 1
    assert record.rounds[0].round_number is None
    assert record.rounds[0].questions == []
    assert record.coding_questions == []
    assert record.key_learnings == ["Practice graphs"]


def test_extra_keys_are_preserved():
    record = ExperienceRecord.model_validate({"id": "a", "custom": {"k": 1}})
    assert record.model_dump()["custom"] == {"k": 1}
