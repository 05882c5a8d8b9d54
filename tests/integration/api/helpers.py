from httpx import AsyncClient

CONTACT = {
    "professional_email": "office@greysloan.org",
    "professional_phone": "206-555-0100",
}


async def onboard_organization_owner(client: AsyncClient, headers: dict) -> str:
    """Standalone signup through to owning an organization; returns its id"""
    response = await client.post("/profiles/me", headers=headers)
    assert response.status_code == 201

    response = await client.post(
        "/onboarding/complete",
        json={**CONTACT, "admin_type": "office_admin", "organization_name": "Grey Sloan Memorial"},
        headers=headers,
    )
    assert response.status_code == 200

    response = await client.post(
        "/organizations", json={"name": "Grey Sloan Memorial"}, headers=headers
    )
    assert response.status_code == 201
    return response.json()["id"]
