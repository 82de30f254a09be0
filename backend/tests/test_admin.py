import pytest
from datetime import timedelta
from app.api.deps import access_security
from sqlmodel import Session, select
from app.core.config import settings
from app.core.security import verify_password
from app.models.user import User, UserRole
from app.scripts.seed_admin import seed_admin

ADMIN_ROUTES = [
    ("post", "/api/menu", {"name": "Mocha", "price": 4}),
    ("put", "/api/menu/1", {"price": 1}),
    ("delete", "/api/menu/1", None),
    ("put", "/api/admin/disable/1", None),
    ("put", "/api/admin/enable/1", None),
    ("get", "/api/admin/users", None),
    ("patch", "/api/admin/orders/1", {"status": "Ready"}),
]


def call(client, method, path, body, headers=None):
    kwargs = {"headers": headers or {}}
    if body is not None:
        kwargs["json"] = body
    return client.request(method.upper(), path, **kwargs)


@pytest.mark.parametrize("method,path,body", ADMIN_ROUTES)
def test_non_admin_is_forbidden(client, user, method, path, body):
    resp = call(client, method, path, body, user["headers"])
    assert resp.status_code == 403
    assert resp.json() == {"error": "Admin only"}


@pytest.mark.parametrize("method,path,body", ADMIN_ROUTES)
def test_missing_token_is_unauthenticated(client, method, path, body):
    resp = call(client, method, path, body)
    assert resp.status_code == 401
    assert resp.json() == {"error": "No token provided"}


def test_garbage_token_is_unauthenticated(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401
    assert resp.json()["error"] != "No token provided"


def test_expired_token_is_unauthenticated(client, user):
    token = access_security.create_access_token(
        subject={"id": user["id"], "role": "user"},
        expires_delta=timedelta(seconds=-60)
    )
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["error"] != "No token provided"


def test_token_with_unknown_role_is_unauthenticated(client, user):
    token = access_security.create_access_token(subject={"id": user["id"], "role": "superuser"})
    resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid token"}


def test_non_bearer_scheme_is_invalid_token(client, user):
    token = user["headers"]["Authorization"].split(" ", 1)[1]
    resp = client.get("/api/auth/me", headers={"Authorization": f"Basic {token}"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid token"}


def test_admin_lists_users(client, admin, user):
    resp = client.get("/api/admin/users", headers=admin["headers"])
    assert resp.status_code == 200
    assert {u["id"] for u in resp.json()} == {admin["id"], user["id"]}


def test_disable_unknown_user_is_not_found(client, admin):
    resp = client.put("/api/admin/disable/9999", headers=admin["headers"])
    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}


def test_seed_admin_creates_admin_once(engine, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "seed-pass")

    created = seed_admin(engine)
    again = seed_admin(engine)
    assert created.id == again.id

    with Session(engine) as session:
        admins = session.exec(select(User).where(User.role == UserRole.ADMIN)).all()
        assert len(admins) == 1
        assert verify_password("seed-pass", admins[0].password_hash)


def test_seed_admin_skips_without_password(engine, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", None)
    assert seed_admin(engine) is None
