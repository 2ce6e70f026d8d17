"""
Integration tests for tenant API key and admin key authentication
"""

import pytest
from httpx import AsyncClient

from tests.integration.settings import API_PREFIX


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "sk_live_missingbearer"},
        {"Authorization": "Bearer pk_live_wrongprefix"},
        {"Authorization": "Bearer sk_live_" + "x" * 32},
    ],
)
async def test_every_credential_failure_looks_the_same(client: AsyncClient, headers):
    """Missing, malformed and unknown keys are indistinguishable"""
    response = await client.get(f"{API_PREFIX}/tables", headers=headers)

    assert response.status_code == 401
    assert response.json() == {
        "error": {"code": "UNAUTHORIZED", "message": "Invalid or missing API key"}
    }


@pytest.mark.asyncio
async def test_admin_creates_tenant_with_one_time_key(client: AsyncClient, admin_headers):
    # Act
    response = await client.post(
        f"{API_PREFIX}/admin/tenants",
        json={"name": "Acme", "quotaRows": 100, "maxTables": 3},
        headers=admin_headers,
    )

    # Assert
    assert response.status_code == 201
    body = response.json()
    assert body["apiKey"].startswith("sk_live_")
    assert len(body["apiKey"]) == len("sk_live_") + 32
    assert body["tenant"]["quotaRows"] == 100
    assert body["tenant"]["maxTables"] == 3
    assert body["tenant"]["usedRows"] == 0
    assert "apiKeyHash" not in body["tenant"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "headers",
    [{}, {"Authorization": "Bearer wrong-admin-key"}, {"X-Admin-API-Key": "test-admin-key-12345"}],
)
async def test_admin_requires_bearer_admin_key(client: AsyncClient, headers):
    response = await client.post(
        f"{API_PREFIX}/admin/tenants", json={"name": "Acme"}, headers=headers
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_tenant_key_is_not_an_admin_key(client: AsyncClient, create_tenant):
    _, headers = await create_tenant()

    response = await client.post(
        f"{API_PREFIX}/admin/tenants", json={"name": "Other"}, headers=headers
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_tenant_info_reports_usage(client: AsyncClient, create_tenant, test_data):
    # Arrange
    tenant, headers = await create_tenant("Acme")
    table = (
        await client.post(f"{API_PREFIX}/tables", json=test_data.get_copy("table"), headers=headers)
    ).json()
    await client.post(
        f"{API_PREFIX}/tables/{table['id']}/rows/bulk",
        json=[{"cells": {}}, {"cells": {}}],
        headers=headers,
    )

    # Act
    response = await client.get(f"{API_PREFIX}/tenant/info", headers=headers)

    # Assert
    assert response.status_code == 200
    info = response.json()
    assert info["id"] == tenant["id"]
    assert info["name"] == "Acme"
    assert info["usedRows"] == 2
