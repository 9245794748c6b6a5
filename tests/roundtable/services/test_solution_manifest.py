import json

import pytest
from roundtable.core.exceptions import SolutionsUnavailableError
from roundtable.services.solution_manifest import (
    build_solution_manifest,
    parse_solution_filename,
    write_solution_manifest,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("lru-cache_main.json", ("lru-cache", None)),
        ("lru-cache_part2.json", ("lru-cache", 2)),
        ("rate_limiter_part10.json", ("rate_limiter", 10)),
        ("lru-cache.json", None),
        ("lru-cache_main.txt", None),
        (".hidden_main.json", None),
        ("temp", None),
    ],
)
def test_parse_solution_filename(name, expected):
    assert parse_solution_filename(name) == expected


def test_build_manifest_groups_parts(tmp_path):
    for name in (
        "lru_main.json",
        "lru_part2.json",
        "lru_part1.json",
        "trie_part1.json",
        "notes.json",
        ".draft_main.json",
        "readme.md",
    ):
        (tmp_path / name).write_text("{}", encoding="utf-8")
    (tmp_path / "temp").mkdir()

    manifest = build_solution_manifest(tmp_path)

    assert manifest.total_with_solutions == 2
    assert manifest.solutions["lru"].main is True
    assert manifest.solutions["lru"].parts == [1, 2]
    assert manifest.solutions["trie"].main is False
    assert manifest.solutions["trie"].parts == [1]
    assert manifest.generated_at.endswith("Z")


def test_empty_directory(tmp_path):
    manifest = build_solution_manifest(tmp_path)
    assert manifest.total_with_solutions == 0
    assert manifest.solutions == {}


def test_missing_directory_raises(tmp_path):
    with pytest.raises(SolutionsUnavailableError) as excinfo:
        build_solution_manifest(tmp_path / "nope")
    assert excinfo.value.message == "Failed to read solutions directory"
    assert excinfo.value.status_code == 500


def test_write_manifest(tmp_path):
    (tmp_path / "sol").mkdir()
    (tmp_path / "sol" / "lru_main.json").write_text("{}", encoding="utf-8")
    manifest = build_solution_manifest(tmp_path / "sol")

    out = write_solution_manifest(manifest, tmp_path / "out" / "solution_manifest.json")

    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["total_with_solutions"] == 1
    assert payload["solutions"]["lru"] == {"main": True, "parts": []}
