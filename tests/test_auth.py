# tests/test_auth.py

"""
Tests for authentication endpoints.
"""

from fastapi.testclient import TestClient


def test_manager_login(client: TestClient):
    """The manager email opens a SINDICO session on the first condominium."""
    response = client.post("/auth/login", json={"email": "sindico@email.com", "password": "x"})

    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "SINDICO"
    assert data["condo_id"] == "c1"
    assert data["resident_id"] is None
    assert data["token_type"] == "bearer"


def test_resident_login_is_case_insensitive(client: TestClient):
    response = client.post("/auth/login", json={"email": "Mari@Email.com", "password": "x"})

    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "MORADOR"
    assert data["resident_id"] == "r3"
    assert data["condo_id"] == "c2"


def test_login_unknown_email(client: TestClient):
    response = client.post("/auth/login", json={"email": "ninguem@email.com", "password": "x"})

    assert response.status_code == 401
    assert "não encontrado" in response.json()["detail"]


def test_login_pending_resident(client: TestClient):
    response = client.post("/auth/login", json={"email": "lucas@email.com", "password": "x"})

    assert response.status_code == 403
    assert "aguardando aprovação" in response.json()["detail"]


def test_protected_route_without_token(client: TestClient):
    response = client.get("/auth/me")
    assert response.status_code == 401


def test_protected_route_with_garbage_token(client: TestClient):
    response = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_me_reports_permissions(client: TestClient, resident_headers):
    response = client.get("/auth/me", headers=resident_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "MORADOR"
    assert data["resident_id"] == "r1"
    assert "notices:read" in data["permissions"]
    assert "finance:read" not in data["permissions"]


def test_logout_invalidates_token(client: TestClient, manager_headers):
    assert client.post("/auth/logout", headers=manager_headers).status_code == 200

    response = client.get("/auth/me", headers=manager_headers)
    assert response.status_code == 401


def test_register_password_mismatch(client: TestClient):
    response = client.post(
        "/auth/register",
        json={
            "name": "Novo Morador",
            "email": "novo@email.com",
            "password": "abc",
            "confirm_password": "abd",
            "condo_id": "c1",
            "unit": "303",
        },
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "As senhas não coincidem."


def test_register_creates_pending_resident(client: TestClient, manager_headers):
    response = client.post(
        "/auth/register",
        json={
            "name": "Novo Morador",
            "email": "Novo@Email.com",
            "password": "abc",
            "confirm_password": "abc",
            "condo_id": "c1",
            "block": "B",
            "unit": "303",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "pending"
    assert data["token"] is None

    # Shows up for the manager, cannot log in yet
    pending = client.get("/residents/pending", headers=manager_headers).json()
    assert data["resident_id"] in {r["id"] for r in pending}

    login = client.post("/auth/login", json={"email": "novo@email.com", "password": "abc"})
    assert login.status_code == 403


def test_register_requires_condo_and_unit(client: TestClient):
    response = client.post(
        "/auth/register",
        json={"name": "Sem Unidade", "email": "semu@email.com", "password": "a", "confirm_password": "a"},
    )
    assert response.status_code == 400


def test_register_unknown_condo(client: TestClient):
    response = client.post(
        "/auth/register",
        json={
            "name": "Perdido",
            "email": "perdido@email.com",
            "password": "a",
            "confirm_password": "a",
            "condo_id": "c99",
            "unit": "1",
        },
    )
    assert response.status_code == 404


def test_register_duplicate_email(client: TestClient):
    response = client.post(
        "/auth/register",
        json={
            "name": "Outra Ana",
            "email": "ana@email.com",
            "password": "a",
            "confirm_password": "a",
            "condo_id": "c1",
            "unit": "999",
        },
    )
    assert response.status_code == 409


def test_register_manager_logs_in(client: TestClient):
    response = client.post(
        "/auth/register",
        json={
            "role": "SINDICO",
            "name": "Nova Síndica",
            "email": "nova@email.com",
            "password": "a",
            "confirm_password": "a",
        },
    )

    assert response.status_code == 200
    token = response.json()["token"]
    assert token["role"] == "SINDICO"

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token['access_token']}"})
    assert me.status_code == 200


def test_forgot_password_rate_limiting(client: TestClient):
    """Five requests succeed, the sixth for the same email is limited."""
    for _ in range(5):
        response = client.post("/auth/forgot-password", json={"email": "ana@email.com"})
        assert response.status_code == 200
        assert response.json()["success"] is True

    response = client.post("/auth/forgot-password", json={"email": "ana@email.com"})
    assert response.status_code == 429
