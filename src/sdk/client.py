"""
Async client for the Data Brain HTTP API.

    async with DataBrainClient(api_key="sk_live_...") as client:
        table = await client.create_table({"name": "Tasks"})
        rows = await client.get_rows(table["id"], {"limit": 20})

Responses are returned as decoded JSON (camelCase keys). Client errors
(4xx) raise immediately; network errors and 5xx responses are retried with
exponential backoff and raise NetworkError after the last attempt.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from .errors import DataBrainError, NetworkError, NotFoundError, parse_api_error

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3

RETRY_INITIAL_DELAY = 0.5
RETRY_BACKOFF_MULTIPLIER = 2
RETRY_MAX_DELAY = 10.0

API_PREFIX = "/api/v1"


def retry_delay(attempt: int, initial: float = RETRY_INITIAL_DELAY) -> float:
    return min(initial * RETRY_BACKOFF_MULTIPLIER**attempt, RETRY_MAX_DELAY)


class DataBrainClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        workspace_id: Optional[str] = None,
        retry_initial_delay: float = RETRY_INITIAL_DELAY,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise DataBrainError("API key is required", "CONFIGURATION_ERROR")

        self.max_retries = max(1, max_retries)
        self.retry_initial_delay = retry_initial_delay

        headers = {"Authorization": f"Bearer {api_key}"}
        if workspace_id:
            headers["X-Workspace-Id"] = str(workspace_id)

        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "DataBrainClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ------------------------------------------------------------------ HTTP

    async def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        last_error: Optional[BaseException] = None

        for attempt in range(self.max_retries):
            try:
                response = await self._http.request(
                    method, API_PREFIX + path, json=body, params=params
                )
            except httpx.TransportError as e:
                last_error = e
                logger.warning("%s %s failed (attempt %d): %s", method, path, attempt + 1, e)
            else:
                if response.is_success:
                    if response.status_code == 204 or not response.content:
                        return None
                    return response.json()

                error = parse_api_error(response.status_code, _safe_json(response))
                if response.status_code < 500:
                    raise error
                last_error = error
                logger.warning(
                    "%s %s returned %d (attempt %d)",
                    method,
                    path,
                    response.status_code,
                    attempt + 1,
                )

            if attempt < self.max_retries - 1:
                await asyncio.sleep(retry_delay(attempt, self.retry_initial_delay))

        raise NetworkError(f"Request failed after {self.max_retries} attempts", last_error)

    async def _get_or_none(self, path: str) -> Optional[Dict[str, Any]]:
        try:
            return await self._request("GET", path)
        except NotFoundError:
            return None

    # ---------------------------------------------------------------- tenant

    async def get_tenant_info(self) -> Dict[str, Any]:
        return await self._request("GET", "/tenant/info")

    # ------------------------------------------------------------ workspaces

    async def list_workspaces(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/workspaces")

    async def create_workspace(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/workspaces", data)

    async def get_workspace(self, workspace_id: str) -> Optional[Dict[str, Any]]:
        return await self._get_or_none(f"/workspaces/{workspace_id}")

    async def update_workspace(self, workspace_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PATCH", f"/workspaces/{workspace_id}", updates)

    async def delete_workspace(self, workspace_id: str) -> None:
        await self._request("DELETE", f"/workspaces/{workspace_id}")

    # ---------------------------------------------------------------- tables

    async def create_table(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/tables", data)

    async def get_table(self, table_id: str) -> Optional[Dict[str, Any]]:
        return await self._get_or_none(f"/tables/{table_id}")

    async def update_table(self, table_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PATCH", f"/tables/{table_id}", updates)

    async def delete_table(self, table_id: str) -> None:
        await self._request("DELETE", f"/tables/{table_id}")

    async def list_tables(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/tables")

    # --------------------------------------------------------------- columns

    async def create_column(self, table_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", f"/tables/{table_id}/columns", data)

    async def get_columns(self, table_id: str) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/tables/{table_id}/columns")

    async def get_column(self, column_id: str) -> Optional[Dict[str, Any]]:
        return await self._get_or_none(f"/columns/{column_id}")

    async def update_column(self, column_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PATCH", f"/columns/{column_id}", updates)

    async def delete_column(self, column_id: str) -> None:
        await self._request("DELETE", f"/columns/{column_id}")

    async def reorder_columns(self, table_id: str, column_ids: Sequence[str]) -> None:
        await self._request("PUT", f"/tables/{table_id}/columns/reorder", list(column_ids))

    # ------------------------------------------------------------------ rows

    async def create_row(self, table_id: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self._request("POST", f"/tables/{table_id}/rows", data or {})

    async def get_row(self, row_id: str) -> Optional[Dict[str, Any]]:
        return await self._get_or_none(f"/rows/{row_id}")

    async def get_rows(self, table_id: str, query: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self._request("GET", f"/tables/{table_id}/rows", params=_query_params(query))

    async def update_row(self, row_id: str, cells: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PATCH", f"/rows/{row_id}", cells)

    async def delete_row(self, row_id: str) -> None:
        await self._request("DELETE", f"/rows/{row_id}")

    async def archive_row(self, row_id: str) -> None:
        await self._request("POST", f"/rows/{row_id}/archive")

    async def unarchive_row(self, row_id: str) -> None:
        await self._request("POST", f"/rows/{row_id}/unarchive")

    async def bulk_create_rows(
        self, table_id: str, rows: Sequence[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        if not rows:
            return []
        return await self._request("POST", f"/tables/{table_id}/rows/bulk", list(rows))

    async def bulk_delete_rows(self, row_ids: Sequence[str]) -> None:
        await self._request("DELETE", "/rows/bulk", list(row_ids))

    async def bulk_archive_rows(self, row_ids: Sequence[str]) -> None:
        await self._request("POST", "/rows/bulk/archive", list(row_ids))

    # ----------------------------------------------------------------- views

    async def create_view(self, table_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", f"/tables/{table_id}/views", data)

    async def get_views(self, table_id: str) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/tables/{table_id}/views")

    async def get_view(self, view_id: str) -> Optional[Dict[str, Any]]:
        return await self._get_or_none(f"/views/{view_id}")

    async def update_view(self, view_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PATCH", f"/views/{view_id}", updates)

    async def delete_view(self, view_id: str) -> None:
        await self._request("DELETE", f"/views/{view_id}")

    async def reorder_views(self, table_id: str, view_ids: Sequence[str]) -> None:
        await self._request("PUT", f"/tables/{table_id}/views/reorder", list(view_ids))

    # -------------------------------------------------------- select options

    async def create_select_option(self, column_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", f"/columns/{column_id}/options", data)

    async def get_select_options(self, column_id: str) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/columns/{column_id}/options")

    async def update_select_option(self, option_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PATCH", f"/options/{option_id}", updates)

    async def delete_select_option(self, option_id: str) -> None:
        await self._request("DELETE", f"/options/{option_id}")

    async def reorder_select_options(self, column_id: str, option_ids: Sequence[str]) -> None:
        await self._request("PUT", f"/columns/{column_id}/options/reorder", list(option_ids))

    # ------------------------------------------------------------- relations

    async def create_relation(
        self, source_row_id: str, source_column_id: str, target_row_id: str
    ) -> None:
        await self._request(
            "POST",
            "/relations",
            {
                "sourceRowId": source_row_id,
                "sourceColumnId": source_column_id,
                "targetRowId": target_row_id,
            },
        )

    async def delete_relation(self, source_row_id: str, column_id: str, target_row_id: str) -> None:
        await self._request(
            "DELETE",
            "/relations",
            {"sourceRowId": source_row_id, "columnId": column_id, "targetRowId": target_row_id},
        )

    async def get_related_rows(self, row_id: str, column_id: str) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/rows/{row_id}/relations/{column_id}")

    async def get_relations_for_row(self, row_id: str) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/rows/{row_id}/relations")

    # ------------------------------------------------------- file references

    async def add_file_reference(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/file-refs", data)

    async def remove_file_reference(self, file_ref_id: str) -> None:
        await self._request("DELETE", f"/file-refs/{file_ref_id}")

    async def get_file_references(self, row_id: str, column_id: str) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/rows/{row_id}/files/{column_id}")

    async def reorder_file_references(
        self, row_id: str, column_id: str, file_ref_ids: Sequence[str]
    ) -> None:
        await self._request(
            "PUT", f"/rows/{row_id}/files/{column_id}/reorder", list(file_ref_ids)
        )

    # ----------------------------------------------------------------- batch

    async def batch(self, operations: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Run operations ({method, params}) in one call; one result per operation"""
        response = await self._request("POST", "/rpc/batch", {"operations": list(operations)})
        return response["results"]


def _safe_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}


def _query_params(query: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    if not query:
        return {}
    params: Dict[str, Any] = {}
    for key in ("limit", "offset", "cursor", "parentRowId"):
        if query.get(key) is not None:
            params[key] = query[key]
    for key in ("includeArchived", "includeSubItems"):
        if query.get(key):
            params[key] = "true"
    for key in ("filters", "sorts"):
        if query.get(key):
            params[key] = json.dumps(query[key])
    return params
