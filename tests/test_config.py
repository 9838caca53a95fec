# tests/test_config.py

"""
Tests for startup configuration checks and health endpoints.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from core.config import DEFAULT_JWT_SECRET, settings
from core.config_validator import validate_config_on_startup, validate_optional_config
from core.store import EntityStore
from main import create_app


def test_default_secret_fatal_in_production():
    with patch.object(settings, "ENV", "production"), patch.object(settings, "JWT_SECRET_KEY", DEFAULT_JWT_SECRET):
        with pytest.raises(RuntimeError):
            validate_config_on_startup()


def test_development_defaults_pass():
    with patch.object(settings, "ENV", "development"):
        validate_config_on_startup()


def test_missing_ai_key_is_a_warning():
    with patch.object(settings, "GEMINI_API_KEY", None):
        assert any("GEMINI_API_KEY" in w for w in validate_optional_config())


def test_health_endpoints(client: TestClient):
    assert client.get("/health/app").json()["status"] == "ok"

    details = client.get("/health/store").json()["details"]
    assert details["condos"] == 2
    assert details["residents"] == 4
    assert details["messages"] == 5


def test_startup_tolerates_routes_without_path():
    """Startup route logging copes with route entries that carry no path."""
    app = create_app(store=EntityStore.seeded())
    app.router.routes.append(object())

    with TestClient(app):
        pass
