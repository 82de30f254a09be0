import os

# Настройки должны быть в окружении до импорта app
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SMTP_HOST"] = "smtp.test"
os.environ["SMTP_USER"] = "no-reply@klara.test"
os.environ["SMTP_PASSWORD"] = "test-password"
os.environ["ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.api.deps import get_mailer


class FakeMailer:
    """Письма складываются в список вместо SMTP"""

    def __init__(self):
        self.sent = []
        self.fail_with = None

    def send(self, recipient, subject, body):
        if self.fail_with:
            raise self.fail_with
        self.sent.append({"to": recipient, "subject": subject, "body": body})

    def send_otp(self, recipient, otp, expires_minutes):
        self.send(recipient, "Klara Coffee OTP", f"Your OTP is {otp}. It expires in {expires_minutes} minutes.")
        self.sent[-1]["otp"] = otp

    @property
    def last_otp(self):
        return self.sent[-1]["otp"]


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def client(mailer):
    app.dependency_overrides[get_mailer] = lambda: mailer
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def engine(client):
    return client.app.state.engine


def signup(client, username="alice", phone="+15550001", email="alice@example.com",
           password="s3cret", role=None):
    payload = {
        "username": username,
        "phone": phone,
        "email": email,
        "password": password,
    }
    if role:
        payload["role"] = role
    resp = client.post("/api/auth/signup", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()["userId"]


def login_headers(client, phone, password="s3cret"):
    resp = client.post("/api/auth/login", json={"phone": phone, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def user(client):
    user_id = signup(client)
    return {"id": user_id, "headers": login_headers(client, "+15550001")}


@pytest.fixture
def other_user(client):
    user_id = signup(client, username="bob", phone="+15550002", email="bob@example.com")
    return {"id": user_id, "headers": login_headers(client, "+15550002")}


@pytest.fixture
def admin(client):
    user_id = signup(client, username="root", phone="+15559999", email="admin@example.com", role="admin")
    return {"id": user_id, "headers": login_headers(client, "+15559999")}


@pytest.fixture
def menu(client, admin):
    items = [
        {"name": "Caffe Latte", "description": "Espresso with milk", "price": 4.5, "category": "Coffee"},
        {"name": "Croissant", "price": 3, "category": "Bakery"},
        {"name": "Matcha", "price": 5, "category": "Latte Specials", "isSpecial": True},
        {"name": "Americano", "price": 3.25, "category": "Coffee"},
    ]
    ids = []
    for item in items:
        resp = client.post("/api/menu", json=item, headers=admin["headers"])
        assert resp.status_code == 200, resp.text
        ids.append(resp.json()["id"])
    return ids
