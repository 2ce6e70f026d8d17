"""
Ownership Verifier

Single place where tenant isolation is enforced. Every route handler and
every batch operation verifies the entity it touches through one of these
methods before calling the data-table adapter.

A missing entity and an entity of another workspace produce the same
NOT_FOUND error (same code, same message), so ids cannot be probed.
"""

import logging
from typing import List, Optional, Sequence
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workspace_context import WorkspaceContext
from src.domain.entities import (
    DataColumn,
    DataRow,
    DataTable,
    DataView,
    FileReference,
    SelectOption,
    Workspace,
)
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


def not_found(kind: str) -> Error:
    return Error("NOT_FOUND", f"{kind} not found")


class OwnershipVerifier:
    """
    Per-request ownership checks, one method per entity kind.

    Callers must have entered the unit of work. Nothing is cached between
    calls; every check re-reads current state.
    """

    def __init__(self, uow: UnitOfWork, context: WorkspaceContext):
        self.uow = uow
        self.context = context

    async def _owns_table(self, table_id: UUID) -> Optional[DataTable]:
        table = await self.uow.data_tables.get_table(table_id)
        if table is None or table.workspace_id != self.context.workspace_id:
            return None
        return table

    async def workspace(self, workspace_id: UUID) -> Result[Optional[Workspace]]:
        """
        Check that workspace_id is addressable by the tenant.

        The tenant's fallback workspace (its own id) has no record, so the
        result value is None for it.
        """
        if workspace_id == self.context.tenant_id:
            return Return.ok(None)
        workspace = await self.uow.workspaces.get_by_id(workspace_id)
        if workspace is None or workspace.tenant_id != self.context.tenant_id:
            logger.debug("Workspace check failed")
            return Return.err(not_found("Workspace"))
        return Return.ok(workspace)

    async def table(self, table_id: UUID) -> Result[DataTable]:
        table = await self._owns_table(table_id)
        if table is None:
            return Return.err(not_found("Table"))
        return Return.ok(table)

    async def column(self, column_id: UUID) -> Result[DataColumn]:
        column = await self.uow.data_tables.get_column(column_id)
        if column is None or await self._owns_table(column.table_id) is None:
            return Return.err(not_found("Column"))
        return Return.ok(column)

    async def row(self, row_id: UUID) -> Result[DataRow]:
        row = await self.uow.data_tables.get_row(row_id)
        if row is None or await self._owns_table(row.table_id) is None:
            return Return.err(not_found("Row"))
        return Return.ok(row)

    async def rows(self, row_ids: Sequence[UUID]) -> Result[List[DataRow]]:
        """Verify every id; a single failure fails the whole set"""
        verified: List[DataRow] = []
        for row_id in row_ids:
            result = await self.row(row_id)
            if result.is_err():
                return result
            verified.append(result.value)
        return Return.ok(verified)

    async def view(self, view_id: UUID) -> Result[DataView]:
        view = await self.uow.data_tables.get_view(view_id)
        if view is None or await self._owns_table(view.table_id) is None:
            return Return.err(not_found("View"))
        return Return.ok(view)

    async def select_option(self, option_id: UUID) -> Result[SelectOption]:
        option = await self.uow.data_tables.get_select_option(option_id)
        if option is None:
            return Return.err(not_found("Select option"))
        column = await self.uow.data_tables.get_column(option.column_id)
        if column is None or await self._owns_table(column.table_id) is None:
            return Return.err(not_found("Select option"))
        return Return.ok(option)

    async def file_reference(self, file_ref_id: UUID) -> Result[FileReference]:
        file_ref = await self.uow.data_tables.get_file_reference(file_ref_id)
        if file_ref is None:
            return Return.err(not_found("File reference"))
        row = await self.uow.data_tables.get_row(file_ref.row_id)
        if row is None or await self._owns_table(row.table_id) is None:
            return Return.err(not_found("File reference"))
        return Return.ok(file_ref)

    async def row_column(self, row_id: UUID, column_id: UUID) -> Result[DataRow]:
        """Verify a row and that the column is one of the row's table columns"""
        row_result = await self.row(row_id)
        if row_result.is_err():
            return row_result
        column = await self.uow.data_tables.get_column(column_id)
        if column is None or column.table_id != row_result.value.table_id:
            return Return.err(not_found("Column"))
        return row_result

    async def relation(
        self, source_row_id: UUID, column_id: UUID, target_row_id: Optional[UUID] = None
    ) -> Result[DataRow]:
        """
        Verify both ends of a relation edge.

        The column must belong to the source row's table; the target row, when
        given, must be in the same workspace.
        """
        source_result = await self.row_column(source_row_id, column_id)
        if source_result.is_err():
            return source_result
        if target_row_id is not None:
            target_result = await self.row(target_row_id)
            if target_result.is_err():
                return target_result
        return source_result
