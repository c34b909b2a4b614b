"""Tests for application-level behaviour: envelope, health, root"""
from fastapi.testclient import TestClient

from sihs_cms.config import Settings
from sihs_cms.main import create_app


def test_root(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["endpoints"]["auth"] == "/api/admin/auth"


def test_health(client: TestClient):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_readiness(client: TestClient):
    response = client.get("/api/health/ready")
    assert response.status_code == 200
    assert "database_latency_ms" in response.json()


def test_unknown_route_uses_envelope(client: TestClient):
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert response.json()["success"] is False
    assert response.json()["message"] == "Route not found"


def test_malformed_body_is_a_400(client: TestClient):
    response = client.post(
        "/api/admin/auth/login",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_create_app_wires_services_from_settings():
    settings = Settings(
        JWT_SECRET="another",
        JWT_EXPIRE_SECONDS=60,
        MAX_FAILED_LOGINS=3,
        METRICS_ENABLED=False,
    )
    app = create_app(settings)

    assert app.state.authenticator.config.max_failed_logins == 3
    assert app.state.authenticator.signer.config.token_expire_seconds == 60
    assert app.state.session_validator.signer.config.jwt_secret == "another"


def test_seed_super_admin_is_idempotent(db):
    from sihs_cms.config import settings
    from sihs_cms.seed_admin import seed_super_admin

    created = seed_super_admin(db, settings, "Root", "Boss@sihs.edu", "secret1")
    assert created.role == "super_admin"
    assert created.email == "boss@sihs.edu"
    assert "manage_admins" in created.permissions

    assert seed_super_admin(db, settings, "Root", "boss@sihs.edu", "secret1") is None


def test_unhandled_exception_uses_server_error_envelope():
    app = create_app(Settings(METRICS_ENABLED=False))

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaput")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["success"] is False
    assert response.json()["message"] == "Server error"


def test_missing_token_is_counted_as_unauthenticated(client: TestClient):
    from prometheus_client import REGISTRY

    def count() -> float:
        return REGISTRY.get_sample_value(
            "sihs_authentication_failures_total", {"reason": "unauthenticated"}
        ) or 0.0

    before = count()
    assert client.get("/api/admin/auth/me").status_code == 401
    assert count() == before + 1
