"""
Unit tests for the workspace use cases
"""
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.app.services.workspace_context import WorkspaceContext
from src.app.use_cases.workspaces import (
    CreateWorkspaceCommand,
    CreateWorkspaceUseCase,
    DeleteWorkspaceUseCase,
    UpdateWorkspaceCommand,
    UpdateWorkspaceUseCase,
)
from src.domain.entities import DataTable, Tenant, Workspace


@pytest.fixture
def tenant():
    return Tenant(name="Acme", api_key_hash="0" * 64, used_rows=5)


@pytest.fixture
def context(tenant):
    return WorkspaceContext(tenant_id=tenant.id, workspace_id=tenant.id)


@pytest.fixture
def mock_uow(tenant):
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.tenants = MagicMock()
    uow.tenants.get_by_id = AsyncMock(return_value=tenant)
    uow.tenants.update = AsyncMock()
    uow.workspaces = MagicMock()
    uow.workspaces.get_by_id = AsyncMock(return_value=None)
    uow.workspaces.get_by_tenant_and_slug = AsyncMock(return_value=None)
    uow.workspaces.create = AsyncMock(side_effect=lambda workspace: workspace)
    uow.workspaces.update = AsyncMock(side_effect=lambda workspace: workspace)
    uow.workspaces.delete = AsyncMock()
    uow.data_tables = MagicMock()
    uow.data_tables.list_tables = AsyncMock(return_value=[])
    uow.data_tables.delete_table = AsyncMock(return_value=0)
    return uow


@pytest.mark.asyncio
async def test_create_rejects_duplicate_slug(mock_uow, tenant):
    mock_uow.workspaces.get_by_tenant_and_slug.return_value = Workspace(
        tenant_id=tenant.id, name="Existing", slug="marketing"
    )

    result = await CreateWorkspaceUseCase(mock_uow).execute(
        tenant.id, CreateWorkspaceCommand(name="Marketing", slug="marketing")
    )

    assert result.is_err()
    assert result.error.code == "CONFLICT"
    mock_uow.workspaces.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_stores_metadata(mock_uow, tenant):
    result = await CreateWorkspaceUseCase(mock_uow).execute(
        tenant.id,
        CreateWorkspaceCommand(name="Marketing", slug="marketing", metadata={"team": "growth"}),
    )

    assert result.is_ok()
    assert result.value.metadata == {"team": "growth"}
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_needs_a_field(mock_uow, context):
    result = await UpdateWorkspaceUseCase(mock_uow, context).execute(
        uuid4(), UpdateWorkspaceCommand()
    )

    assert result.is_err()
    assert result.error.code == "BAD_REQUEST"


@pytest.mark.asyncio
async def test_update_with_null_quota_clears_it(mock_uow, tenant, context):
    workspace = Workspace(
        tenant_id=tenant.id, name="Marketing", slug="marketing", quota_rows=5, used_rows=0
    )
    mock_uow.workspaces.get_by_id.return_value = workspace

    result = await UpdateWorkspaceUseCase(mock_uow, context).execute(
        workspace.id, UpdateWorkspaceCommand.model_validate({"quotaRows": None})
    )

    assert result.is_ok()
    assert result.value.quota_rows is None
    assert result.value.name == "Marketing"
    mock_uow.commit.assert_awaited_once()


def test_update_rejects_null_name():
    with pytest.raises(ValidationError):
        UpdateWorkspaceCommand.model_validate({"name": None})


@pytest.mark.asyncio
async def test_update_of_fallback_workspace_is_not_found(mock_uow, context):
    result = await UpdateWorkspaceUseCase(mock_uow, context).execute(
        context.tenant_id, UpdateWorkspaceCommand(name="Renamed")
    )

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_removes_tables_and_releases_rows(mock_uow, tenant, context):
    # Arrange
    workspace = Workspace(tenant_id=tenant.id, name="Marketing", slug="marketing", used_rows=3)
    tables = [DataTable(workspace_id=workspace.id, name=n) for n in ("A", "B")]
    mock_uow.workspaces.get_by_id.return_value = workspace
    mock_uow.data_tables.list_tables.return_value = tables
    mock_uow.data_tables.delete_table.side_effect = [2, 1]

    # Act
    result = await DeleteWorkspaceUseCase(mock_uow, context).execute(workspace.id)

    # Assert
    assert result.is_ok()
    assert mock_uow.data_tables.delete_table.await_count == 2
    assert tenant.used_rows == 2
    mock_uow.workspaces.delete.assert_awaited_once_with(workspace)
    mock_uow.commit.assert_awaited_once()
