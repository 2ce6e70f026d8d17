"""
Unit tests for DataBrainClient

HTTP is served by httpx.MockTransport; no server is started.
"""
import json

import httpx
import pytest

from src.sdk import (
    AuthenticationError,
    DataBrainClient,
    DataBrainError,
    NetworkError,
    NotFoundError,
    QuotaExceededError,
    ValidationError,
)
from src.sdk.client import retry_delay


def _client(handler, **kwargs):
    return DataBrainClient(
        api_key="sk_test_abc",
        base_url="http://brain.test",
        retry_initial_delay=0,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def _error(status_code, code, message, details=None):
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return httpx.Response(status_code, json={"error": error})


def test_api_key_is_required():
    with pytest.raises(DataBrainError):
        DataBrainClient(api_key="")


def test_retry_delay_backs_off_and_caps():
    assert retry_delay(0, 0.5) == 0.5
    assert retry_delay(2, 0.5) == 2.0
    assert retry_delay(10, 0.5) == 10.0


@pytest.mark.asyncio
async def test_sends_credentials_and_workspace_header():
    seen = {}

    def handler(request: httpx.Request):
        seen["auth"] = request.headers.get("Authorization")
        seen["workspace"] = request.headers.get("X-Workspace-Id")
        seen["path"] = request.url.path
        return httpx.Response(200, json=[])

    async with _client(handler, workspace_id="ws-1") as client:
        assert await client.list_tables() == []

    assert seen == {"auth": "Bearer sk_test_abc", "workspace": "ws-1", "path": "/api/v1/tables"}


@pytest.mark.asyncio
async def test_server_errors_are_retried_then_succeed():
    calls = []

    def handler(request: httpx.Request):
        calls.append(request)
        if len(calls) < 3:
            return _error(503, "INTERNAL_ERROR", "busy")
        return httpx.Response(200, json={"id": "t1"})

    async with _client(handler) as client:
        table = await client.create_table({"name": "Tasks"})

    assert table == {"id": "t1"}
    assert len(calls) == 3
    assert json.loads(calls[0].content) == {"name": "Tasks"}


@pytest.mark.asyncio
async def test_transport_errors_end_in_network_error():
    calls = []

    def handler(request: httpx.Request):
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler, max_retries=2) as client:
        with pytest.raises(NetworkError) as exc_info:
            await client.list_tables()

    assert len(calls) == 2
    assert isinstance(exc_info.value.original_error, httpx.ConnectError)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response, error_type",
    [
        (_error(401, "UNAUTHORIZED", "Invalid or missing API key"), AuthenticationError),
        (_error(403, "QUOTA_EXCEEDED", "Row quota of 10 exceeded"), QuotaExceededError),
        (
            _error(400, "VALIDATION_ERROR", "bad", {"errors": [{"path": "name", "message": "x"}]}),
            ValidationError,
        ),
    ],
)
async def test_client_errors_are_typed_and_not_retried(response, error_type):
    calls = []

    def handler(request: httpx.Request):
        calls.append(request)
        return response

    async with _client(handler) as client:
        with pytest.raises(error_type):
            await client.create_row("t1", {"cells": {}})

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_validation_error_carries_field_errors():
    def handler(request: httpx.Request):
        return _error(400, "VALIDATION_ERROR", "bad", {"errors": [{"path": "name", "message": "x"}]})

    async with _client(handler) as client:
        with pytest.raises(ValidationError) as exc_info:
            await client.create_table({})

    assert exc_info.value.errors == [{"path": "name", "message": "x"}]


@pytest.mark.asyncio
async def test_getters_return_none_for_missing_entities():
    def handler(request: httpx.Request):
        return _error(404, "NOT_FOUND", "Row not found")

    async with _client(handler) as client:
        assert await client.get_row("r1") is None
        with pytest.raises(NotFoundError):
            await client.delete_row("r1")


@pytest.mark.asyncio
async def test_row_query_is_encoded_in_query_string():
    seen = {}

    def handler(request: httpx.Request):
        seen.update(dict(request.url.params))
        return httpx.Response(200, json={"items": [], "total": 0, "hasMore": False})

    async with _client(handler) as client:
        await client.get_rows(
            "t1",
            {
                "limit": 10,
                "includeArchived": True,
                "includeSubItems": False,
                "filters": [{"columnId": "c", "operator": "equals", "value": 1}],
            },
        )

    assert seen["limit"] == "10"
    assert seen["includeArchived"] == "true"
    assert "includeSubItems" not in seen
    assert json.loads(seen["filters"]) == [{"columnId": "c", "operator": "equals", "value": 1}]


@pytest.mark.asyncio
async def test_batch_returns_results_list():
    def handler(request: httpx.Request):
        body = json.loads(request.content)
        return httpx.Response(
            200, json={"results": [{"success": True, "data": op["method"]} for op in body["operations"]]}
        )

    async with _client(handler) as client:
        results = await client.batch([{"method": "listTables", "params": {}}])

    assert results == [{"success": True, "data": "listTables"}]
