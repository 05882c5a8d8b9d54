import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import ProviderProfile
from tests.integration.api.helpers import CONTACT
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_standalone_plan_has_three_steps(client: AsyncClient, make_user):
    _, headers = make_user("solo@clinic.org")
    await client.post("/profiles/me", headers=headers)

    response = await client.get("/onboarding", headers=headers)

    assert response.status_code == 200
    plan = response.json()
    assert plan["total_steps"] == 3
    assert [s["title"] for s in plan["steps"]] == [
        "Contact Information",
        "Professional Details",
        "Organization Information",
    ]
    assert plan["invitation"] is None
    assert plan["onboarding_completed"] is False


@pytest.mark.asyncio
async def test_unknown_token_is_reported_on_plan(client: AsyncClient, make_user):
    _, headers = make_user("solo@clinic.org")

    response = await client.get("/onboarding", params={"token": "nope"}, headers=headers)

    assert response.status_code == 200
    assert response.json()["invitation_error"] == "invalid_token"
    assert response.json()["total_steps"] == 3


@pytest.mark.asyncio
async def test_validate_rejects_out_of_range_step(client: AsyncClient, make_user):
    _, headers = make_user("solo@clinic.org")

    response = await client.post("/onboarding/validate", json={"step": 4}, headers=headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_complete_reports_errors_per_step(client: AsyncClient, make_user):
    _, headers = make_user("solo@clinic.org")
    await client.post("/profiles/me", headers=headers)

    response = await client.post("/onboarding/complete", json={}, headers=headers)

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "validation_error"
    assert set(error["details"]["errors"]) == {"1", "2", "3"}


@pytest.mark.asyncio
async def test_standalone_physician_completes_onboarding(client: AsyncClient, db_session, make_user):
    user_id, headers = make_user("solo@clinic.org", "Derek", "Shepherd")
    await client.post("/profiles/me", headers=headers)

    response = await client.post(
        "/onboarding/complete",
        json={
            **CONTACT,
            "specialties": ["Neurology"],
            "npi_number": "1112223334",
            "organization_name": "Shepherd Neuro",
        },
        headers=headers,
    )

    assert response.status_code == 200
    assert exclude_keys(response.json(), {"id", "user_id"}) == {
        "email": "solo@clinic.org",
        "first_name": "Derek",
        "last_name": "Shepherd",
        "phone": None,
        "role": "physician",
        "organization_id": None,
        "organization_name": "Shepherd Neuro",
        "professional_email": CONTACT["professional_email"],
        "professional_phone": CONTACT["professional_phone"],
        "specialties": ["Neurology"],
        "specialty": "Neurology",
        "npi_number": "1112223334",
        "admin_type": None,
        "department": None,
        "onboarding_completed": True,
    }

    result = await db_session.exec(
        select(ProviderProfile.onboarding_completed).where(ProviderProfile.user_id == user_id)
    )
    assert result.one() is True

    again = await client.post("/onboarding/complete", json={}, headers=headers)
    assert again.status_code == 409


@pytest.mark.asyncio
async def test_complete_without_profile(client: AsyncClient, make_user):
    _, headers = make_user("ghost@clinic.org")

    response = await client.post("/onboarding/complete", json=CONTACT, headers=headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_numeric_npi_is_accepted_as_digits(client: AsyncClient, make_user):
    _, headers = make_user("solo@clinic.org")
    await client.post("/profiles/me", headers=headers)

    response = await client.post(
        "/onboarding/complete",
        json={
            **CONTACT,
            "specialties": ["Cardiology"],
            "npi_number": 1234567890,
            "organization_name": "Heart Clinic",
        },
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["npi_number"] == "1234567890"


@pytest.mark.asyncio
async def test_non_text_npi_is_rejected(client: AsyncClient, make_user):
    _, headers = make_user("solo@clinic.org")

    response = await client.post(
        "/onboarding/validate",
        json={"step": 2, "data": {"npi_number": {"value": "1234567890"}}},
        headers=headers,
    )

    assert response.status_code == 422
