"""
End-to-end check of the client SDK against the application
"""

import pytest
from httpx import ASGITransport

from src.sdk import DataBrainClient, NotFoundError


@pytest.mark.asyncio
async def test_sdk_round_trip(app, create_tenant):
    _, headers = await create_tenant()
    api_key = headers["Authorization"].removeprefix("Bearer ")
    transport = ASGITransport(app=app)

    async with DataBrainClient(
        api_key=api_key, base_url="http://test", transport=transport, retry_initial_delay=0
    ) as sdk:
        table = await sdk.create_table({"name": "Tasks"})
        rows = await sdk.bulk_create_rows(table["id"], [{"cells": {"n": 1}}, {"cells": {"n": 2}}])
        page = await sdk.get_rows(
            table["id"], {"sorts": [{"columnId": "n", "direction": "desc"}]}
        )
        results = await sdk.batch(
            [
                {"method": "getRow", "params": {"id": rows[0]["id"]}},
                {"method": "deleteTable", "params": {"id": table["id"]}},
            ]
        )

        assert [r["cells"]["n"] for r in page["items"]] == [2, 1]
        assert [r["success"] for r in results] == [True, True]
        assert await sdk.get_table(table["id"]) is None
        with pytest.raises(NotFoundError):
            await sdk.update_table(table["id"], {"name": "Gone"})
