# tests/test_notices.py

"""
Tests for notices and AI drafting.
"""

from unittest.mock import Mock, patch

import requests
from fastapi.testclient import TestClient

from core.config import settings
from services import ai_drafting


def test_notices_pinned_first(client: TestClient, manager_headers):
    client.post(
        "/notices",
        json={"title": "Nova Regra", "message": "Silêncio após 22h", "category": "Aviso Geral"},
        headers=manager_headers,
    )

    notices = client.get("/notices", headers=manager_headers).json()

    # n1 is pinned; the rest stay newest first
    assert [n["id"] for n in notices][0] == "n1"
    assert notices[1]["title"] == "Nova Regra"
    assert notices[2]["id"] == "n2"


def test_create_notice_defaults(client: TestClient, manager_headers):
    response = client.post(
        "/notices",
        json={"title": "Água", "message": "Falta de água amanhã"},
        headers=manager_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["category"] == "Aviso Geral"
    assert data["pinned"] is False
    assert data["condo_id"] == "c1"
    assert data["date"]


def test_create_notice_rejects_empty_title(client: TestClient, manager_headers):
    response = client.post("/notices", json={"title": "", "message": "x"}, headers=manager_headers)
    assert response.status_code == 422


def test_resident_reads_but_cannot_publish(client: TestClient, resident_headers):
    assert client.get("/notices", headers=resident_headers).status_code == 200

    response = client.post(
        "/notices",
        json={"title": "Meu aviso", "message": "texto"},
        headers=resident_headers,
    )
    assert response.status_code == 403


# -----------------------------------------------------
# AI drafting
# -----------------------------------------------------
def test_draft_without_api_key(client: TestClient, manager_headers):
    with patch.object(settings, "GEMINI_API_KEY", None):
        response = client.post("/notices/draft", json={"topic": "Dedetização"}, headers=manager_headers)

    assert response.status_code == 200
    assert response.json()["message"] == ai_drafting.MISSING_KEY_MESSAGE


def test_draft_success(client: TestClient, manager_headers):
    mock_response = Mock()
    mock_response.raise_for_status.return_value = None
    mock_response.json.return_value = {
        "candidates": [{"content": {"parts": [{"text": "Prezados moradores, "}, {"text": "haverá dedetização."}]}}]
    }

    with patch.object(settings, "GEMINI_API_KEY", "test-key"):
        with patch("services.ai_drafting.requests.post", return_value=mock_response) as mock_post:
            response = client.post(
                "/notices/draft",
                json={"topic": "Dedetização", "tone": "Amigável"},
                headers=manager_headers,
            )

    assert response.status_code == 200
    assert response.json()["message"] == "Prezados moradores, haverá dedetização."

    _, kwargs = mock_post.call_args
    assert kwargs["params"] == {"key": "test-key"}
    prompt = kwargs["json"]["contents"][0]["parts"][0]["text"]
    assert "Dedetização" in prompt
    assert "Amigável" in prompt


def test_draft_connection_error(client: TestClient, manager_headers):
    with patch.object(settings, "GEMINI_API_KEY", "test-key"):
        with patch("services.ai_drafting.requests.post", side_effect=requests.ConnectionError("down")):
            response = client.post("/notices/draft", json={"topic": "Obras"}, headers=manager_headers)

    assert response.status_code == 200
    assert response.json()["message"] == ai_drafting.CONNECTION_ERROR_MESSAGE


def test_draft_empty_response():
    mock_response = Mock()
    mock_response.raise_for_status.return_value = None
    mock_response.json.return_value = {"candidates": []}

    with patch.object(settings, "GEMINI_API_KEY", "test-key"):
        with patch("services.ai_drafting.requests.post", return_value=mock_response):
            assert ai_drafting.draft_notice_content("Obras", "Formal") == ai_drafting.EMPTY_RESPONSE_MESSAGE


def test_draft_requires_manager(client: TestClient, resident_headers):
    response = client.post("/notices/draft", json={"topic": "Obras"}, headers=resident_headers)
    assert response.status_code == 403
