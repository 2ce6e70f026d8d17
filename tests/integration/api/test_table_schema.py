"""
Integration tests for columns, views and select options
"""

import pytest
from httpx import AsyncClient

from tests.integration.settings import API_PREFIX


@pytest.fixture
def table_with_columns(client: AsyncClient, test_data):
    async def _create(headers):
        table = (
            await client.post(
                f"{API_PREFIX}/tables", json=test_data.get_copy("table"), headers=headers
            )
        ).json()
        columns = {}
        for payload in test_data.get_copy("columns"):
            response = await client.post(
                f"{API_PREFIX}/tables/{table['id']}/columns", json=payload, headers=headers
            )
            assert response.status_code == 201, response.text
            columns[payload["type"]] = response.json()
        return table, columns

    return _create


@pytest.mark.asyncio
async def test_columns_are_listed_in_position_order(
    client: AsyncClient, create_tenant, table_with_columns
):
    _, headers = await create_tenant()
    table, columns = await table_with_columns(headers)
    url = f"{API_PREFIX}/tables/{table['id']}/columns"

    listed = (await client.get(url, headers=headers)).json()
    new_order = [c["id"] for c in reversed(listed)]
    reordered = await client.put(f"{url}/reorder", json=new_order, headers=headers)
    relisted = (await client.get(url, headers=headers)).json()

    assert [c["position"] for c in listed] == [0, 1, 2, 3, 4]
    assert listed[0]["isPrimary"] is True
    assert reordered.json() == {"success": True}
    assert [c["id"] for c in relisted] == new_order


@pytest.mark.asyncio
async def test_update_and_delete_column(client: AsyncClient, create_tenant, table_with_columns):
    _, headers = await create_tenant()
    _, columns = await table_with_columns(headers)
    column_id = columns["number"]["id"]

    renamed = await client.patch(
        f"{API_PREFIX}/columns/{column_id}",
        json={"name": "Points", "width": 120},
        headers=headers,
    )
    deleted = await client.delete(f"{API_PREFIX}/columns/{column_id}", headers=headers)
    missing = await client.get(f"{API_PREFIX}/columns/{column_id}", headers=headers)

    assert renamed.json()["name"] == "Points"
    assert renamed.json()["width"] == 120
    assert renamed.json()["type"] == "number"
    assert deleted.json() == {"success": True}
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_unknown_column_type_is_rejected(client: AsyncClient, create_tenant, test_data):
    _, headers = await create_tenant()
    table = (
        await client.post(f"{API_PREFIX}/tables", json=test_data.get_copy("table"), headers=headers)
    ).json()

    response = await client.post(
        f"{API_PREFIX}/tables/{table['id']}/columns",
        json={"name": "Mood", "type": "emoji"},
        headers=headers,
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_views_crud(client: AsyncClient, create_tenant, table_with_columns, test_data):
    _, headers = await create_tenant()
    table, _ = await table_with_columns(headers)
    url = f"{API_PREFIX}/tables/{table['id']}/views"

    board = (await client.post(url, json=test_data.get_copy("view"), headers=headers)).json()
    grid = (await client.post(url, json={"name": "Grid", "type": "table"}, headers=headers)).json()
    await client.put(f"{url}/reorder", json=[grid["id"], board["id"]], headers=headers)
    updated = await client.patch(
        f"{API_PREFIX}/views/{board['id']}", json={"isDefault": True}, headers=headers
    )
    listed = (await client.get(url, headers=headers)).json()

    assert board["config"] == {"groupBy": "status"}
    assert updated.json()["isDefault"] is True
    assert [v["name"] for v in listed] == ["Grid", "Board"]

    await client.delete(f"{API_PREFIX}/views/{grid['id']}", headers=headers)
    assert (await client.get(f"{API_PREFIX}/views/{grid['id']}", headers=headers)).status_code == 404


@pytest.mark.asyncio
async def test_select_options_lifecycle(
    client: AsyncClient, create_tenant, table_with_columns, test_data
):
    _, headers = await create_tenant()
    _, columns = await table_with_columns(headers)
    url = f"{API_PREFIX}/columns/{columns['select']['id']}/options"

    created = []
    for payload in test_data.get_copy("select_options"):
        response = await client.post(url, json=payload, headers=headers)
        assert response.status_code == 201
        created.append(response.json())
    await client.put(
        f"{url}/reorder", json=[o["id"] for o in reversed(created)], headers=headers
    )
    recolored = await client.patch(
        f"{API_PREFIX}/options/{created[0]['id']}", json={"color": "red"}, headers=headers
    )
    await client.delete(f"{API_PREFIX}/options/{created[1]['id']}", headers=headers)
    listed = (await client.get(url, headers=headers)).json()

    assert recolored.json()["color"] == "red"
    assert [o["name"] for o in listed] == ["Done", "Todo"]


@pytest.mark.asyncio
async def test_select_options_need_select_column(
    client: AsyncClient, create_tenant, table_with_columns
):
    _, headers = await create_tenant()
    _, columns = await table_with_columns(headers)

    response = await client.post(
        f"{API_PREFIX}/columns/{columns['text']['id']}/options",
        json={"name": "Nope"},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_foreign_option_is_not_found(
    client: AsyncClient, create_tenant, table_with_columns
):
    _, first = await create_tenant("First")
    _, second = await create_tenant("Second")
    _, columns = await table_with_columns(first)
    option = (
        await client.post(
            f"{API_PREFIX}/columns/{columns['select']['id']}/options",
            json={"name": "Mine"},
            headers=first,
        )
    ).json()

    response = await client.patch(
        f"{API_PREFIX}/options/{option['id']}", json={"name": "Stolen"}, headers=second
    )

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Select option not found"
