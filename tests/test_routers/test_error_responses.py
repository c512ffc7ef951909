"""Server-side failures come back as JSON with a generic message."""

from unittest.mock import AsyncMock, patch

from pymongo.errors import AutoReconnect


async def test_database_outage_on_list_hotels(client):
    from app.main import app

    with patch.object(
        app.state.hotel_service, "list_hotels",
        new_callable=AsyncMock, side_effect=AutoReconnect("connection refused"),
    ):
        resp = await client.get("/api/hotels")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}


async def test_database_outage_on_create_booking(client, hotel_id, signup_and_login):
    from app.main import app

    auth = await signup_and_login(client)
    with patch.object(
        app.state.booking_service._bookings, "insert_one",
        new_callable=AsyncMock, side_effect=AutoReconnect("primary stepped down"),
    ):
        resp = await client.post(
            "/api/bookings",
            json={
                "hotelName": "Hotel Sunrise",
                "roomType": "Standard",
                "numGuests": 2,
                "checkInDate": "2026-12-20",
                "checkOutDate": "2026-12-22",
            },
            headers={"Authorization": auth},
        )

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}


async def test_corrupt_hotel_document(client, db):
    """A stored hotel missing required fields fails without leaking details."""
    await db["hotels"].insert_one({"name": "Half Written"})

    resp = await client.get("/api/hotels")

    assert resp.status_code == 500
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == {"message": "Internal server error"}


async def test_unexpected_exception(client):
    from app.main import app

    with patch.object(
        app.state.feedback_service, "list_feedback",
        new_callable=AsyncMock, side_effect=RuntimeError("boom"),
    ):
        resp = await client.get("/api/feedback")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}
    assert "boom" not in resp.text
