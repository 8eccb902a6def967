from fastapi.testclient import TestClient

from backend.app.core.security import verify_admin_session_token
from backend.app.main import app

ADMIN_KEY = "correct-horse-battery"


def test_login_not_found_when_admin_unconfigured(configure):
    configure()
    with TestClient(app) as client:
        response = client.post("/api/admin/login", json={"password": "anything"})
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not found."}


def test_wrong_password_returns_401(configure):
    configure(ADMIN_API_KEY=ADMIN_KEY)
    with TestClient(app) as client:
        response = client.post("/api/admin/login", json={"password": "wrong"})
    assert response.status_code == 401
    assert response.json()["success"] is False


def test_missing_password_returns_401(configure):
    configure(ADMIN_API_KEY=ADMIN_KEY)
    with TestClient(app) as client:
        response = client.post("/api/admin/login", json={})
    assert response.status_code == 401


def test_successful_login_returns_signed_token(configure):
    settings = configure(ADMIN_API_KEY=ADMIN_KEY, ADMIN_SESSION_SECRET="session-secret", ADMIN_SESSION_TTL_HOURS="2")
    with TestClient(app) as client:
        response = client.post("/api/admin/login", json={"password": ADMIN_KEY})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert isinstance(data["token"], str) and "." in data["token"]
    verification = verify_admin_session_token(data["token"], settings.admin_session_secret)
    assert verification.valid
    assert verification.expires_at == data["expiresAt"]
    assert not verify_admin_session_token(data["token"], ADMIN_KEY).valid


def test_malformed_body_returns_400(configure):
    configure(ADMIN_API_KEY=ADMIN_KEY)
    with TestClient(app) as client:
        response = client.post(
            "/api/admin/login", content="{not json", headers={"Content-Type": "application/json"}
        )
    assert response.status_code == 400
    assert response.json()["success"] is False
