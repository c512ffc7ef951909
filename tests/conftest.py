from unittest.mock import patch

import httpx
import pytest
from httpx import ASGITransport
from mongomock_motor import AsyncMongoMockClient

JWT_SECRET = "test-jwt-secret-that-is-long-enough-for-hs256"
DB_NAME = "hotel_booking_test"


def _make_hotel(name="Hotel Sunrise", **overrides) -> dict:
    hotel = {
        "name": name,
        "address": "12 Beach Road, Goa",
        "roomTypes": [
            {"type": "Standard", "rate": 1000, "availability": True},
            {"type": "Deluxe", "rate": 900, "availability": True},
            {"type": "Suite", "rate": 5000, "availability": False},
        ],
        "rating": 4.2,
        "reviews": [
            {"reviewer": "asha", "comment": "Lovely view", "rating": 5},
        ],
        "vacancy": True,
        "images": ["sunrise-1.jpg", "sunrise-2.jpg"],
    }
    hotel.update(overrides)
    return hotel


SIGNUP_BODY = {
    "username": "ravi",
    "name": "Ravi Kumar",
    "email": "ravi@example.com",
    "phone": "9876543210",
    "address": "4 MG Road, Bengaluru",
    "aadhar": "1234-5678-9012",
    "password": "s3cret-pass",
}


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")
    monkeypatch.setenv("MONGO_DB_NAME", DB_NAME)
    monkeypatch.setenv("JWT_SECRET", JWT_SECRET)
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest.fixture
def db(mongo_client):
    return mongo_client[DB_NAME]


@pytest.fixture
async def client(mock_env, mongo_client):
    from app.main import app, lifespan

    with patch("app.main.AsyncIOMotorClient", return_value=mongo_client):
        async with lifespan(app):
            async with httpx.AsyncClient(
                transport=ASGITransport(app=app, raise_app_exceptions=False),
                base_url="http://test",
            ) as c:
                yield c


async def _signup_and_login(client, **overrides) -> str:
    body = {**SIGNUP_BODY, **overrides}
    resp = await client.post("/api/auth/signup", json=body)
    assert resp.status_code == 201
    resp = await client.post(
        "/api/auth/login",
        json={"email": body["email"], "password": body["password"]},
    )
    assert resp.status_code == 200
    return f"Bearer {resp.json()['token']}"


@pytest.fixture
def make_hotel():
    return _make_hotel


@pytest.fixture
def signup_body():
    return dict(SIGNUP_BODY)


@pytest.fixture
def signup_and_login():
    """Register a user through the API and return a bearer header value."""
    return _signup_and_login


@pytest.fixture
async def hotel_id(db):
    result = await db["hotels"].insert_one(_make_hotel())
    return str(result.inserted_id)
