# tests/test_residents.py

"""
Tests for resident endpoints and the approval workflow.
"""

from fastapi.testclient import TestClient


def _ids(response):
    return {r["id"] for r in response.json()}


def test_approve_pending_resident(client: TestClient, manager_headers):
    response = client.post("/residents/r4/approve", headers=manager_headers)

    assert response.status_code == 200
    assert response.json()["status"] == "active"
    assert _ids(client.get("/residents", headers=manager_headers)) == {"r1", "r2", "r4"}
    assert client.get("/residents/pending", headers=manager_headers).json() == []


def test_approved_resident_can_log_in(client: TestClient, manager_headers):
    client.post("/residents/r4/approve", headers=manager_headers)

    response = client.post("/auth/login", json={"email": "lucas@email.com", "password": "x"})
    assert response.status_code == 200
    assert response.json()["condo_id"] == "c1"


def test_reject_pending_resident(client: TestClient, app, manager_headers):
    store = app.state.store
    before = len(store.residents)

    response = client.post("/residents/r4/reject", headers=manager_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True, "removed": True}
    assert _ids(client.get("/residents", headers=manager_headers)) == {"r1", "r2"}
    assert len(store.residents) == before - 1

    # Rejecting again is harmless
    again = client.post("/residents/r4/reject", headers=manager_headers)
    assert again.status_code == 200
    assert again.json()["removed"] is False
    assert len(store.residents) == before - 1


def test_approve_active_resident_conflicts(client: TestClient, manager_headers):
    response = client.post("/residents/r1/approve", headers=manager_headers)
    assert response.status_code == 409


def test_resident_cannot_manage_residents(client: TestClient, resident_headers):
    assert client.get("/residents", headers=resident_headers).status_code == 403
    assert client.get("/residents/pending", headers=resident_headers).status_code == 403
    assert client.post("/residents/r4/approve", headers=resident_headers).status_code == 403


def test_other_condo_resident_is_not_found(client: TestClient, manager_headers):
    # r3 lives in c2, the manager is on c1
    response = client.patch("/residents/r3", json={"phone": "1"}, headers=manager_headers)
    assert response.status_code == 404


def test_manager_quick_add_is_active(client: TestClient, manager_headers):
    response = client.post(
        "/residents",
        json={"name": "Paula Nova", "block": "C", "unit": "10", "email": "paula@email.com"},
        headers=manager_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "active"
    assert data["condo_id"] == "c1"
    assert data["type"] == "Morador"


def test_search_residents(client: TestClient, manager_headers):
    response = client.get("/residents", params={"search": "roberto"}, headers=manager_headers)
    assert _ids(response) == {"r2"}


def test_update_resident_keeps_status(client: TestClient, manager_headers):
    response = client.patch(
        "/residents/r2",
        json={"unit": "104", "status": "pending"},
        headers=manager_headers,
    )

    assert response.status_code == 200
    assert response.json()["unit"] == "104"
    assert response.json()["status"] == "active"


def test_resident_profile(client: TestClient, resident_headers):
    response = client.get("/residents/me", headers=resident_headers)

    assert response.status_code == 200
    assert response.json()["id"] == "r1"


def test_resident_updates_own_contact(client: TestClient, resident_headers):
    response = client.patch(
        "/residents/me",
        json={"phone": "(11) 90000-1234", "email": "Ana.Paula@Email.com"},
        headers=resident_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["phone"] == "(11) 90000-1234"
    assert data["email"] == "ana.paula@email.com"


def test_profile_email_must_be_unique(client: TestClient, resident_headers):
    response = client.patch("/residents/me", json={"email": "beto@email.com"}, headers=resident_headers)
    assert response.status_code == 409


def test_manager_has_no_profile(client: TestClient, manager_headers):
    assert client.get("/residents/me", headers=manager_headers).status_code == 403


def test_null_fields_leave_resident_unchanged(client: TestClient, manager_headers):
    response = client.patch(
        "/residents/r1",
        json={"name": None, "email": None, "phone": "(11) 91111-0000"},
        headers=manager_headers,
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Ana Paula"
    assert response.json()["email"] == "ana@email.com"

    search = client.get("/residents", params={"search": "ana"}, headers=manager_headers)
    assert search.status_code == 200
    assert _ids(search) == {"r1"}


def test_quick_add_duplicate_email(client: TestClient, manager_headers):
    response = client.post(
        "/residents",
        json={"name": "Ana Clone", "unit": "303", "email": "ANA@email.com"},
        headers=manager_headers,
    )

    assert response.status_code == 409


def test_quick_add_normalises_email(client: TestClient, manager_headers):
    response = client.post(
        "/residents",
        json={"name": "Clara", "unit": "303", "email": "Clara@Email.com"},
        headers=manager_headers,
    )

    assert response.status_code == 200
    assert response.json()["email"] == "clara@email.com"

    login = client.post("/auth/login", json={"email": "clara@email.com", "password": "x"})
    assert login.status_code == 200


def test_quick_add_rejects_invalid_email(client: TestClient, manager_headers):
    response = client.post(
        "/residents",
        json={"name": "Clara", "unit": "303", "email": "not-an-email"},
        headers=manager_headers,
    )

    assert response.status_code == 422


def test_update_resident_duplicate_email(client: TestClient, manager_headers):
    response = client.patch("/residents/r2", json={"email": "ana@email.com"}, headers=manager_headers)

    assert response.status_code == 409

    # Both residents can still log in with their own email
    beto = client.post("/auth/login", json={"email": "beto@email.com", "password": "x"})
    assert beto.json()["resident_id"] == "r2"
    ana = client.post("/auth/login", json={"email": "ana@email.com", "password": "x"})
    assert ana.json()["resident_id"] == "r1"
