from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from deadline_triage.app import create_app
from deadline_triage.config import Settings


@pytest.fixture
def client(tmp_path: Path) -> TestClient:
    logging_conf = tmp_path / "logging_settings.conf"
    logging_conf.write_text("terminal = warning\nengine = info\n")
    settings = Settings(
        _env_file=None,
        server_timezone="UTC",
        logging_settings_path=logging_conf,
    )
    return TestClient(create_app(settings))


SCENARIO = [
    {"id": "t1", "kind": "tactical", "structuredDeadline": "2024-01-01"},
    {"id": "t2", "kind": "tactical", "title": "finish by tomorrow"},
]


def test_triage_all_scenario(client: TestClient) -> None:
    response = client.post(
        "/api/deadlines/triage",
        json={
            "tasks": SCENARIO,
            "userDateTime": "2024-01-01T09:00:00",
            "message": "any deadlines?",
            "agent": "dumbo",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["intent"] == "all"
    assert body["referenceDate"] == "2024-01-01"
    assert body["referenceSource"] == "client"
    assert body["warning"] is None
    assert body["highlightNodes"] == {
        "nodeIds": ["t1", "t2"],
        "color": "multi",
        "durationMs": 10000,
    }
    triage = body["triage"]
    assert [item["id"] for item in triage["today"]] == ["t1"]
    assert [item["id"] for item in triage["tomorrow"]] == ["t2"]
    assert [item["id"] for item in triage["upcoming"]] == ["t1", "t2"]
    assert triage["overdue"] == []
    assert triage["today"][0]["confidence"] == 1.0
    assert triage["tomorrow"][0] == {
        "id": "t2",
        "label": "finish by tomorrow",
        "deadline": "2024-01-02",
        "confidence": 0.8,
        "source": "title",
    }
    assert triage["summary"] in body["context"]
    assert body["systemPrompt"].startswith(body["context"])
    assert "Dumbo" in body["systemPrompt"]


def test_small_talk_skips_triage(client: TestClient) -> None:
    response = client.post(
        "/api/deadlines/triage",
        json={
            "tasks": SCENARIO,
            "userDateTime": "2024-01-01T09:00:00",
            "message": "how's it going?",
        },
    )

    body = response.json()
    assert response.status_code == 200
    assert body["intent"] == "none"
    assert body["triage"] is None
    assert body["highlightNodes"] is None
    assert body["context"] is None


def test_other_agent_never_triggers(client: TestClient) -> None:
    response = client.post(
        "/api/deadlines/triage",
        json={
            "tasks": SCENARIO,
            "userDateTime": "2024-01-01T09:00:00",
            "message": "what's overdue?",
            "agent": "grimpy",
        },
    )

    assert response.json()["intent"] == "none"


def test_canvas_nodes_are_flattened(client: TestClient) -> None:
    nodes = [
        {"id": "n1", "type": "tactical", "data": {"title": "Pay rent", "deadline": "2023-12-28"}},
        {"id": "n2", "type": "resource", "data": {"title": "Docs due 2023-12-01"}},
    ]

    response = client.post(
        "/api/deadlines/triage",
        json={"tasks": nodes, "userDateTime": "2024-01-01", "message": "what's overdue?"},
    )

    body = response.json()
    assert body["intent"] == "overdue"
    assert body["highlightNodes"]["nodeIds"] == ["n1"]
    assert body["highlightNodes"]["color"] == "red"
    assert body["triage"]["scanned"] == 1
    assert body["triage"]["overdue"][0]["label"] == "Pay rent"


def test_missing_client_time_uses_server_time(client: TestClient) -> None:
    response = client.post("/api/deadlines/scan", json={"tasks": []})

    body = response.json()
    assert response.status_code == 200
    assert body["intent"] == "all"
    assert body["referenceSource"] == "server"
    assert body["warning"]
    assert body["triage"]["scanned"] == 0
    assert body["highlightNodes"]["nodeIds"] == []


def test_intent_endpoint(client: TestClient) -> None:
    response = client.post("/api/deadlines/intent", json={"message": "Anything URGENT?"})

    assert response.status_code == 200
    assert response.json() == {"intent": "upcoming"}


def test_invalid_payload_rejected(client: TestClient) -> None:
    response = client.post("/api/deadlines/triage", json={"tasks": [{"title": "no id"}]})

    assert response.status_code == 422


def test_health_reports_chat_provider(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "chat_provider": "openai",
        "chat_model": "gpt-4o-mini",
    }
