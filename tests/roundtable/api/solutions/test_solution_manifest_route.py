from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient
from roundtable.api import register_routes
from roundtable.core.dependencies import get_solution_manifest
from roundtable.core.exceptions import register_exception_handlers
from roundtable.services.solution_manifest import build_solution_manifest


def create_app(solutions_dir) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    register_routes(app)
    app.dependency_overrides[get_solution_manifest] = lambda: build_solution_manifest(
        solutions_dir
    )
    return app


def test_manifest_lists_solutions(tmp_path):
    for name in ("lru_main.json", "lru_part2.json", "lru_part1.json", "temp", ".x_main.json"):
        (tmp_path / name).write_text("{}", encoding="utf-8")

    resp = TestClient(create_app(tmp_path)).get("/api/solution-manifest")

    assert resp.status_code == 200
    data = resp.json()
    assert data["total_with_solutions"] == 1
    assert data["solutions"] == {"lru": {"main": True, "parts": [1, 2]}}
    assert data["generated_at"].endswith("Z")


def test_unreadable_directory_returns_500(tmp_path):
    resp = TestClient(create_app(tmp_path / "missing")).get("/api/solution-manifest")

    assert resp.status_code == 500
    data = resp.json()
    assert data["error"] == "Failed to read solutions directory"
    assert data["code"] == "solutions_unavailable"
