import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import AuditEvent
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_settings_round_trip(client: AsyncClient, registered, test_data, db_session):
    """PUT then GET returns exactly the submitted values"""
    _, headers = registered
    submitted = test_data.get_copy("settings")

    put_response = await client.put("/user/settings", headers=headers, json=submitted)
    assert put_response.status_code == 200

    get_response = await client.get("/user/settings", headers=headers)
    assert get_response.status_code == 200
    assert get_response.json() == submitted

    event = (
        await db_session.exec(select(AuditEvent).where(AuditEvent.action == "settings_updated"))
    ).one()
    # showLocation stays at its default (False)
    assert event.details["changes"] == list(exclude_keys(submitted, {"showLocation"}))


@pytest.mark.asyncio
async def test_default_settings(client: AsyncClient, registered):
    _, headers = registered

    response = await client.get("/user/settings", headers=headers)

    assert response.status_code == 200
    assert response.json() == {
        "theme": "system",
        "language": "en",
        "timezone": "UTC",
        "emailNotifications": True,
        "pushNotifications": False,
        "marketingEmails": False,
        "securityAlerts": True,
        "profileVisibility": "private",
        "showEmail": False,
        "showPhone": False,
        "showLocation": False,
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"theme": "neon"}, "theme"),
        ({"language": "e"}, "language"),
        ({"profileVisibility": "everyone"}, "profileVisibility"),
        ({"showEmail": "maybe"}, "showEmail"),
    ],
)
async def test_invalid_settings(client: AsyncClient, registered, test_data, overrides, field):
    _, headers = registered
    payload = test_data.payload("settings", **overrides)

    response = await client.put("/user/settings", headers=headers, json=payload)

    assert response.status_code == 400
    assert field in response.json()["error"]["details"]


@pytest.mark.asyncio
async def test_settings_require_session(client: AsyncClient):
    response = await client.get("/user/settings")

    assert response.status_code == 401
