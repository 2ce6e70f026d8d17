"""
Unit tests for OwnershipVerifier

Covers isolation between workspaces and the parent chains walked for
columns, rows, views, select options and file references.
"""
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.workspace_context import WorkspaceContext
from src.domain.entities import (
    ColumnType,
    DataColumn,
    DataRow,
    DataTable,
    FileReference,
    SelectOption,
    Workspace,
)


@pytest.fixture
def context():
    tenant_id = uuid4()
    return WorkspaceContext(tenant_id=tenant_id, workspace_id=tenant_id)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.data_tables = MagicMock()
    uow.data_tables.get_table = AsyncMock(return_value=None)
    uow.data_tables.get_column = AsyncMock(return_value=None)
    uow.data_tables.get_row = AsyncMock(return_value=None)
    uow.data_tables.get_view = AsyncMock(return_value=None)
    uow.data_tables.get_select_option = AsyncMock(return_value=None)
    uow.data_tables.get_file_reference = AsyncMock(return_value=None)
    uow.workspaces = MagicMock()
    uow.workspaces.get_by_id = AsyncMock(return_value=None)
    return uow


def _store(mock_uow, *entities):
    """Serve entities from the mocked adapter by id"""
    by_id = {entity.id: entity for entity in entities}

    def lookup(kind):
        async def _get(entity_id):
            entity = by_id.get(entity_id)
            return entity if isinstance(entity, kind) else None

        return _get

    mock_uow.data_tables.get_table.side_effect = lookup(DataTable)
    mock_uow.data_tables.get_column.side_effect = lookup(DataColumn)
    mock_uow.data_tables.get_row.side_effect = lookup(DataRow)
    mock_uow.data_tables.get_select_option.side_effect = lookup(SelectOption)
    mock_uow.data_tables.get_file_reference.side_effect = lookup(FileReference)


@pytest.mark.asyncio
async def test_table_in_own_workspace(mock_uow, context):
    table = DataTable(workspace_id=context.workspace_id, name="Tasks")
    _store(mock_uow, table)

    result = await OwnershipVerifier(mock_uow, context).table(table.id)

    assert result.is_ok()
    assert result.value is table


@pytest.mark.asyncio
async def test_foreign_table_looks_like_missing_table(mock_uow, context):
    """A table of another workspace and an absent table give the same error"""
    foreign = DataTable(workspace_id=uuid4(), name="Secret")
    _store(mock_uow, foreign)
    verifier = OwnershipVerifier(mock_uow, context)

    foreign_result = await verifier.table(foreign.id)
    missing_result = await verifier.table(uuid4())

    assert foreign_result.is_err()
    assert foreign_result.error == missing_result.error
    assert foreign_result.error.code == "NOT_FOUND"
    assert foreign_result.error.message == "Table not found"


@pytest.mark.asyncio
async def test_row_is_checked_through_its_table(mock_uow, context):
    own_table = DataTable(workspace_id=context.workspace_id, name="Mine")
    foreign_table = DataTable(workspace_id=uuid4(), name="Theirs")
    own_row = DataRow(table_id=own_table.id, cells={})
    foreign_row = DataRow(table_id=foreign_table.id, cells={})
    _store(mock_uow, own_table, foreign_table, own_row, foreign_row)
    verifier = OwnershipVerifier(mock_uow, context)

    assert (await verifier.row(own_row.id)).is_ok()
    foreign = await verifier.row(foreign_row.id)
    assert foreign.is_err()
    assert foreign.error.message == "Row not found"


@pytest.mark.asyncio
async def test_rows_fail_as_a_set(mock_uow, context):
    """One foreign id fails the whole list"""
    own_table = DataTable(workspace_id=context.workspace_id, name="Mine")
    foreign_table = DataTable(workspace_id=uuid4(), name="Theirs")
    own_row = DataRow(table_id=own_table.id, cells={})
    foreign_row = DataRow(table_id=foreign_table.id, cells={})
    _store(mock_uow, own_table, foreign_table, own_row, foreign_row)

    result = await OwnershipVerifier(mock_uow, context).rows([own_row.id, foreign_row.id])

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"


@pytest.mark.asyncio
async def test_select_option_chain(mock_uow, context):
    table = DataTable(workspace_id=context.workspace_id, name="Tasks")
    column = DataColumn(table_id=table.id, name="Status", type=ColumnType.select)
    option = SelectOption(column_id=column.id, name="Todo")
    orphan = SelectOption(column_id=uuid4(), name="Lost")
    _store(mock_uow, table, column, option, orphan)
    verifier = OwnershipVerifier(mock_uow, context)

    assert (await verifier.select_option(option.id)).is_ok()
    result = await verifier.select_option(orphan.id)
    assert result.error.message == "Select option not found"


@pytest.mark.asyncio
async def test_file_reference_chain(mock_uow, context):
    foreign_table = DataTable(workspace_id=uuid4(), name="Theirs")
    foreign_row = DataRow(table_id=foreign_table.id, cells={})
    file_ref = FileReference(
        row_id=foreign_row.id,
        column_id=uuid4(),
        file_id="f1",
        file_url="https://files.example.com/f1",
        original_name="a.txt",
        mime_type="text/plain",
    )
    _store(mock_uow, foreign_table, foreign_row, file_ref)

    result = await OwnershipVerifier(mock_uow, context).file_reference(file_ref.id)

    assert result.is_err()
    assert result.error.message == "File reference not found"


@pytest.mark.asyncio
async def test_row_column_requires_column_of_same_table(mock_uow, context):
    table = DataTable(workspace_id=context.workspace_id, name="Tasks")
    other_table = DataTable(workspace_id=context.workspace_id, name="Other")
    row = DataRow(table_id=table.id, cells={})
    other_column = DataColumn(table_id=other_table.id, name="Title", type=ColumnType.text)
    _store(mock_uow, table, other_table, row, other_column)

    result = await OwnershipVerifier(mock_uow, context).row_column(row.id, other_column.id)

    assert result.is_err()
    assert result.error.message == "Column not found"


@pytest.mark.asyncio
async def test_relation_checks_target_row(mock_uow, context):
    table = DataTable(workspace_id=context.workspace_id, name="Tasks")
    foreign_table = DataTable(workspace_id=uuid4(), name="Theirs")
    column = DataColumn(table_id=table.id, name="Blocked by", type=ColumnType.relation)
    source = DataRow(table_id=table.id, cells={})
    target = DataRow(table_id=foreign_table.id, cells={})
    _store(mock_uow, table, foreign_table, column, source, target)

    result = await OwnershipVerifier(mock_uow, context).relation(source.id, column.id, target.id)

    assert result.is_err()
    assert result.error.message == "Row not found"


@pytest.mark.asyncio
async def test_fallback_workspace_needs_no_record(mock_uow, context):
    result = await OwnershipVerifier(mock_uow, context).workspace(context.tenant_id)

    assert result.is_ok()
    assert result.value is None
    mock_uow.workspaces.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_workspace_of_other_tenant(mock_uow, context):
    workspace = Workspace(tenant_id=uuid4(), name="Other", slug="other")
    mock_uow.workspaces.get_by_id.return_value = workspace

    result = await OwnershipVerifier(mock_uow, context).workspace(workspace.id)

    assert result.is_err()
    assert result.error.message == "Workspace not found"
