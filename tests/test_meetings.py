# tests/test_meetings.py

"""
Tests for meetings and service providers.
"""

from fastapi.testclient import TestClient


def test_create_meeting_combines_date_and_time(client: TestClient, manager_headers):
    response = client.post(
        "/meetings",
        json={"title": "Extraordinária", "date": "2024-06-10", "time": "20:30", "agenda": "1. Portão"},
        headers=manager_headers,
    )

    assert response.status_code == 200
    assert response.json()["date"].startswith("2024-06-10T20:30")


def test_meetings_in_date_order(client: TestClient, manager_headers):
    client.post(
        "/meetings",
        json={"title": "Antes", "date": "2024-06-01", "time": "09:00"},
        headers=manager_headers,
    )

    meetings = client.get("/meetings", headers=manager_headers).json()
    assert [m["title"] for m in meetings] == ["Antes", "Assembleia Geral Ordinária"]


def test_resident_lists_but_cannot_schedule(client: TestClient, resident_headers):
    assert client.get("/meetings", headers=resident_headers).status_code == 200

    response = client.post(
        "/meetings",
        json={"title": "Minha", "date": "2024-06-10", "time": "20:30"},
        headers=resident_headers,
    )
    assert response.status_code == 403


# -----------------------------------------------------
# Providers
# -----------------------------------------------------
def test_add_and_deactivate_provider(client: TestClient, manager_headers):
    created = client.post(
        "/providers",
        json={"name": "Zé Encanador", "specialty": "Hidráulica", "phone": "(11) 95555-0000",
              "company": "ZE Hidro"},
        headers=manager_headers,
    )
    assert created.status_code == 200
    provider_id = created.json()["id"]
    assert created.json()["active"] is True

    toggled = client.patch(f"/providers/{provider_id}", json={"active": False}, headers=manager_headers)
    assert toggled.json()["active"] is False

    active = client.get("/providers", params={"active_only": True}, headers=manager_headers).json()
    assert {p["id"] for p in active} == {"p1", "p2"}


def test_unknown_provider(client: TestClient, manager_headers):
    response = client.patch("/providers/missing", json={"active": False}, headers=manager_headers)
    assert response.status_code == 404


def test_resident_cannot_see_providers(client: TestClient, resident_headers):
    assert client.get("/providers", headers=resident_headers).status_code == 403


def test_null_active_keeps_provider_active(client: TestClient, manager_headers):
    response = client.patch("/providers/p1", json={"active": None, "phone": "(11) 90000-1111"}, headers=manager_headers)

    assert response.status_code == 200
    assert response.json()["active"] is True

    active = client.get("/providers", params={"active_only": True}, headers=manager_headers).json()
    assert {p["id"] for p in active} == {"p1", "p2"}
