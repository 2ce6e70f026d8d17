"""
Integration tests for tenant isolation

Every entity of one tenant must be invisible to another: reads, writes and
deletes on foreign ids answer exactly like ids that do not exist.
"""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from tests.integration.settings import API_PREFIX


@pytest.fixture
def two_tenants(create_tenant):
    async def _setup():
        _, first = await create_tenant("First")
        _, second = await create_tenant("Second")
        return first, second

    return _setup


async def _table_with_row(client: AsyncClient, headers, test_data):
    table = (
        await client.post(f"{API_PREFIX}/tables", json=test_data.get_copy("table"), headers=headers)
    ).json()
    row = (
        await client.post(
            f"{API_PREFIX}/tables/{table['id']}/rows",
            json={"cells": {"title": "Ship it"}},
            headers=headers,
        )
    ).json()
    return table, row


@pytest.mark.asyncio
async def test_foreign_row_reads_as_not_found(client: AsyncClient, two_tenants, test_data):
    """
    Given tenant T1 owns a row
    When T2 reads it by id
    Then T2 gets the same 404 as for an id that never existed
    """
    first, second = await two_tenants()
    _, row = await _table_with_row(client, first, test_data)

    own = await client.get(f"{API_PREFIX}/rows/{row['id']}", headers=first)
    foreign = await client.get(f"{API_PREFIX}/rows/{row['id']}", headers=second)
    missing = await client.get(f"{API_PREFIX}/rows/{uuid4()}", headers=second)

    assert own.status_code == 200
    assert own.json()["cells"] == {"title": "Ship it"}
    assert foreign.status_code == 404
    assert foreign.json() == missing.json()
    assert foreign.json()["error"] == {"code": "NOT_FOUND", "message": "Row not found"}


@pytest.mark.asyncio
async def test_foreign_tables_are_not_listed_or_writable(
    client: AsyncClient, two_tenants, test_data
):
    first, second = await two_tenants()
    table, _ = await _table_with_row(client, first, test_data)

    listed = await client.get(f"{API_PREFIX}/tables", headers=second)
    patched = await client.patch(
        f"{API_PREFIX}/tables/{table['id']}", json={"name": "Hijacked"}, headers=second
    )
    deleted = await client.delete(f"{API_PREFIX}/tables/{table['id']}", headers=second)
    new_row = await client.post(
        f"{API_PREFIX}/tables/{table['id']}/rows", json={"cells": {}}, headers=second
    )

    assert listed.json() == []
    assert patched.status_code == 404
    assert deleted.status_code == 404
    assert new_row.status_code == 404

    still_there = await client.get(f"{API_PREFIX}/tables/{table['id']}", headers=first)
    assert still_there.json()["name"] == "Tasks"


@pytest.mark.asyncio
async def test_bulk_delete_with_one_foreign_id_deletes_nothing(
    client: AsyncClient, two_tenants, test_data
):
    """
    Given T2 owns row A and T1 owns row B
    When T2 bulk-deletes [A, B]
    Then the request fails with 404 and A still exists
    """
    first, second = await two_tenants()
    _, foreign_row = await _table_with_row(client, first, test_data)
    _, own_row = await _table_with_row(client, second, test_data)

    response = await client.request(
        "DELETE",
        f"{API_PREFIX}/rows/bulk",
        json=[own_row["id"], foreign_row["id"]],
        headers=second,
    )

    assert response.status_code == 404
    assert (await client.get(f"{API_PREFIX}/rows/{own_row['id']}", headers=second)).status_code == 200
    assert (
        await client.get(f"{API_PREFIX}/rows/{foreign_row['id']}", headers=first)
    ).status_code == 200


@pytest.mark.asyncio
async def test_relation_to_foreign_row_is_rejected(client: AsyncClient, two_tenants, test_data):
    first, second = await two_tenants()
    _, foreign_row = await _table_with_row(client, first, test_data)
    table, own_row = await _table_with_row(client, second, test_data)
    column = (
        await client.post(
            f"{API_PREFIX}/tables/{table['id']}/columns",
            json={"name": "Blocked by", "type": "relation"},
            headers=second,
        )
    ).json()

    response = await client.post(
        f"{API_PREFIX}/relations",
        json={
            "sourceRowId": own_row["id"],
            "sourceColumnId": column["id"],
            "targetRowId": foreign_row["id"],
        },
        headers=second,
    )

    assert response.status_code == 404
    relations = await client.get(f"{API_PREFIX}/rows/{own_row['id']}/relations", headers=second)
    assert relations.json() == []


@pytest.mark.asyncio
async def test_bulk_archive_with_one_foreign_id_archives_nothing(
    client: AsyncClient, two_tenants, test_data
):
    first, second = await two_tenants()
    _, foreign_row = await _table_with_row(client, first, test_data)
    _, own_row = await _table_with_row(client, second, test_data)

    response = await client.post(
        f"{API_PREFIX}/rows/bulk/archive",
        json=[own_row["id"], foreign_row["id"]],
        headers=second,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
    own = await client.get(f"{API_PREFIX}/rows/{own_row['id']}", headers=second)
    foreign = await client.get(f"{API_PREFIX}/rows/{foreign_row['id']}", headers=first)
    assert own.json()["archived"] is False
    assert foreign.json()["archived"] is False
