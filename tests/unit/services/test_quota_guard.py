"""
Unit tests for QuotaGuard
"""
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.quota_guard import QuotaGuard
from src.app.services.workspace_context import WorkspaceContext
from src.domain.entities import Tenant, Workspace


@pytest.fixture
def tenant():
    return Tenant(name="Acme", api_key_hash="0" * 64, quota_rows=10, used_rows=8, max_tables=2)


@pytest.fixture
def mock_uow(tenant):
    uow = MagicMock()
    uow.tenants = MagicMock()
    uow.tenants.get_by_id = AsyncMock(return_value=tenant)
    uow.tenants.update = AsyncMock()
    uow.workspaces = MagicMock()
    uow.workspaces.get_by_id = AsyncMock(return_value=None)
    uow.workspaces.list_by_tenant_id = AsyncMock(return_value=[])
    uow.workspaces.update = AsyncMock()
    uow.data_tables = MagicMock()
    uow.data_tables.count_tables = AsyncMock(return_value=0)
    return uow


def _fallback(tenant):
    return WorkspaceContext(tenant_id=tenant.id, workspace_id=tenant.id)


@pytest.mark.asyncio
async def test_table_limit_counts_every_workspace(mock_uow, tenant):
    workspace = Workspace(tenant_id=tenant.id, name="Marketing", slug="marketing")
    mock_uow.workspaces.list_by_tenant_id.return_value = [workspace]
    mock_uow.data_tables.count_tables.return_value = 2

    result = await QuotaGuard(mock_uow, _fallback(tenant)).ensure_table_capacity()

    assert result.is_err()
    assert result.error.code == "QUOTA_EXCEEDED"
    mock_uow.data_tables.count_tables.assert_awaited_once_with([tenant.id, workspace.id])


@pytest.mark.asyncio
async def test_row_quota_allows_exact_fit(mock_uow, tenant):
    guard = QuotaGuard(mock_uow, _fallback(tenant))

    assert (await guard.ensure_row_capacity(2)).is_ok()
    result = await guard.ensure_row_capacity(3)
    assert result.is_err()
    assert result.error.code == "QUOTA_EXCEEDED"


@pytest.mark.asyncio
async def test_workspace_quota_is_enforced(mock_uow, tenant):
    tenant.used_rows = 0
    workspace = Workspace(
        tenant_id=tenant.id, name="Marketing", slug="marketing", quota_rows=1, used_rows=1
    )
    mock_uow.workspaces.get_by_id.return_value = workspace
    context = WorkspaceContext(tenant_id=tenant.id, workspace_id=workspace.id)

    result = await QuotaGuard(mock_uow, context).ensure_row_capacity(1)

    assert result.is_err()
    assert "Workspace row quota" in result.error.message


@pytest.mark.asyncio
async def test_record_rows_never_goes_negative(mock_uow, tenant):
    await QuotaGuard(mock_uow, _fallback(tenant)).record_rows(-20)

    assert tenant.used_rows == 0
    mock_uow.tenants.update.assert_awaited_once_with(tenant)
    mock_uow.workspaces.update.assert_not_called()


@pytest.mark.asyncio
async def test_record_rows_updates_workspace_counter(mock_uow, tenant):
    workspace = Workspace(tenant_id=tenant.id, name="Marketing", slug="marketing", used_rows=3)
    mock_uow.workspaces.get_by_id.return_value = workspace
    context = WorkspaceContext(tenant_id=tenant.id, workspace_id=workspace.id)

    await QuotaGuard(mock_uow, context).record_rows(2)

    assert tenant.used_rows == 10
    assert workspace.used_rows == 5
    mock_uow.workspaces.update.assert_awaited_once_with(workspace)


@pytest.mark.asyncio
async def test_zero_delta_is_a_no_op(mock_uow, tenant):
    await QuotaGuard(mock_uow, _fallback(tenant)).record_rows(0)

    mock_uow.tenants.get_by_id.assert_not_called()
