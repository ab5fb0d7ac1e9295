import pytest

from nutriapp import create_app
from nutriapp.extensions import db

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    "SQLALCHEMY_TRACK_MODIFICATIONS": False,
    "SECRET_KEY": "test-secret",
    "STORAGE_BACKEND": "sqlalchemy",
    "MULTI_TENANT": True,
    "BMI_SOURCE": "application",
}


def make_app(**overrides):
    app = create_app({**TEST_CONFIG, **overrides})
    with app.app_context():
        db.create_all()
    return app


@pytest.fixture(scope="module")
def app():
    app = make_app()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def register(client, email, password="secret123", full_name="Test Nutritionist"):
    r = client.post("/api/auth/register", json={"email": email, "password": password, "full_name": full_name})
    if r.status_code == 409:
        r = client.post("/api/auth/login", json={"email": email, "password": password})
    return r.get_json()


def auth_headers(client, email="nutri@example.com"):
    token = register(client, email)["token"]
    return {"Authorization": f"Bearer {token}"}


def create_patient(client, headers, **fields):
    payload = {"full_name": "Ana Torres", **fields}
    r = client.post("/api/patients", headers=headers, json=payload)
    assert r.status_code == 201, r.get_json()
    return r.get_json()
