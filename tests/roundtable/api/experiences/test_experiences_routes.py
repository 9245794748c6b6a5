from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient
from roundtable.api import register_routes
from roundtable.core.dependencies import get_experience_store
from roundtable.core.exceptions import register_exception_handlers
from roundtable.schemas.experiences import ExperiencesDataset
from roundtable.services.experience_store import ExperienceStore


def _store() -> ExperienceStore:
    return ExperienceStore(
        ExperiencesDataset.model_validate(
            {
                "company": "Acme",
                "experiences": [
                    {
                        "id": "exp-1",
                        "folder": "2024-01-exp-1",
                        "metadata": {
                            "title": "Phone screen then onsite",
                            "post_type": "experience",
                            "position_level": "Senior",
                        },
                        "outcome": {"result": "Rejected"},
                        "summary": "Graph heavy loop",
                        "_meta": {"source_date": "2024-01-05"},
                        "coding_questions": [
                            {"question": "Find the shortest path in a grid", "topic": "Graphs"}
                        ],
                    },
                    {
                        "id": "exp-2",
                        "metadata": {"post_type": "experience", "position_level": "Junior"},
                        "outcome": "accepted",
                    },
                ],
            }
        )
    )


def create_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    register_routes(app)
    app.dependency_overrides[get_experience_store] = _store
    return app


def test_list_experiences_normalizes_and_filters():
    client = TestClient(create_app())
    data = client.get("/api/experiences").json()
    assert data["company"] == "Acme"
    assert data["total"] == 2
    assert data["count"] == 2
    first = data["experiences"][0]
    assert first["title"] == "Phone screen then onsite"
    assert first["outcome"] == "Rejected"
    assert first["display_date"] == "Jan 5, 2024"
    assert data["experiences"][1]["outcome"] == "accepted"
    assert data["experiences"][1]["display_date"] == "Unknown date"

    data = client.get("/api/experiences", params={"outcome": "reject"}).json()
    assert [e["id"] for e in data["experiences"]] == ["exp-1"]
    assert data["total"] == 2

    data = client.get("/api/experiences", params={"level": "junior", "q": ""}).json()
    assert [e["id"] for e in data["experiences"]] == ["exp-2"]

    data = client.get("/api/experiences", params={"q": "graph"}).json()
    assert [e["id"] for e in data["experiences"]] == ["exp-1"]


def test_stats_filters_and_coding_questions():
    client = TestClient(create_app())
    stats = client.get("/api/experiences/stats").json()
    assert stats["total"] == 2
    assert stats["pass_rate"] == 50
    assert stats["outcomes"] == {"accepted": 1, "rejected": 1, "pending": 0, "unknown": 0}

    filters = client.get("/api/experiences/filters").json()
    assert filters["outcomes"] == ["Rejected", "accepted"]
    assert filters["levels"] == ["Junior", "Senior"]

    coding = client.get("/api/experiences/coding-questions").json()
    assert len(coding) == 1
    assert coding[0]["experience_id"] == "exp-1"
    assert coding[0]["round"] == "Unknown"


def test_get_experience_by_id_or_folder():
    client = TestClient(create_app())
    resp = client.get("/api/experiences/2024-01-exp-1")
    assert resp.status_code == 200
    data = resp.json()
    assert data["summary"]["id"] == "exp-1"
    assert data["record"]["_meta"]["source_date"] == "2024-01-05"

    resp = client.get("/api/experiences/nope")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Experience not found: nope"
