import pytest
from fastapi.testclient import TestClient

from skillswap.core.security import get_password_hash
from skillswap.db.database import get_db
from skillswap.db.store import Database
from skillswap.main import app

API = "/api/v1"
PASSWORD = "secret-pass"


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register(client: TestClient, email: str, name: str, password: str = PASSWORD) -> dict:
    """Register through the API and return the user with its auth headers."""
    response = client.post(f"{API}/auth/register", json={"email": email, "name": name, "password": password})
    assert response.status_code == 201, response.text
    data = response.json()["data"]
    return {**data["user"], "token": data["access_token"], "headers": auth_headers(data["access_token"])}


def login(client: TestClient, email: str, password: str = PASSWORD):
    return client.post(f"{API}/auth/login", json={"email": email, "password": password})


def add_skill(client: TestClient, user: dict, name: str, skill_type: str = "offered", description: str = "") -> dict:
    response = client.post(
        f"{API}/skills",
        json={"name": name, "type": skill_type, "description": description},
        headers=user["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
def db():
    return Database()


@pytest.fixture
def client(db):
    # no context manager, so startup seeding never touches the test store
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def alice(client):
    return register(client, "alice@example.com", "Alice")


@pytest.fixture
def bob(client):
    return register(client, "bob@example.com", "Bob")


@pytest.fixture
def carol(client):
    return register(client, "carol@example.com", "Carol")


@pytest.fixture
def admin(client, db):
    db.users.create(
        email="admin@example.com",
        name="Admin",
        role="admin",
        hashed_password=get_password_hash(PASSWORD),
    )
    data = login(client, "admin@example.com").json()["data"]
    return {**data["user"], "token": data["access_token"], "headers": auth_headers(data["access_token"])}


@pytest.fixture
def swap(client, alice, bob):
    """A pending request from bob (offering Guitar) to alice (offering Cooking)."""
    cooking = add_skill(client, alice, "Cooking")
    guitar = add_skill(client, bob, "Guitar")
    response = client.post(
        f"{API}/swap-requests",
        json={"receiver_id": alice["id"], "offered_skill_id": guitar["id"], "wanted_skill_id": cooking["id"]},
        headers=bob["headers"],
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]
