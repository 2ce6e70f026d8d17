"""
Integration tests for table CRUD
"""

import pytest
from httpx import AsyncClient

from tests.integration.settings import API_PREFIX
from tests.utils.json_compare import exclude_keys

GENERATED_KEYS = {"id", "workspaceId", "createdAt", "updatedAt"}


@pytest.mark.asyncio
async def test_table_crud(client: AsyncClient, create_tenant, test_data):
    # Arrange
    tenant, headers = await create_tenant()
    payload = test_data.get_copy("table")

    # Act
    created = await client.post(f"{API_PREFIX}/tables", json=payload, headers=headers)
    table_id = created.json()["id"]
    fetched = await client.get(f"{API_PREFIX}/tables/{table_id}", headers=headers)
    updated = await client.patch(
        f"{API_PREFIX}/tables/{table_id}", json={"description": "Sprint board"}, headers=headers
    )
    listed = await client.get(f"{API_PREFIX}/tables", headers=headers)

    # Assert
    assert created.status_code == 201
    assert exclude_keys(created.json(), GENERATED_KEYS) == payload
    assert created.json()["workspaceId"] == tenant["id"]
    assert fetched.json() == created.json()
    assert updated.json()["description"] == "Sprint board"
    assert updated.json()["name"] == payload["name"]
    assert [t["id"] for t in listed.json()] == [table_id]


@pytest.mark.asyncio
async def test_null_update_leaves_field_unchanged(client: AsyncClient, create_tenant, test_data):
    _, headers = await create_tenant()
    table = (
        await client.post(f"{API_PREFIX}/tables", json=test_data.get_copy("table"), headers=headers)
    ).json()

    response = await client.patch(
        f"{API_PREFIX}/tables/{table['id']}", json={"icon": None}, headers=headers
    )

    assert response.status_code == 200
    assert response.json()["icon"] == "check"
