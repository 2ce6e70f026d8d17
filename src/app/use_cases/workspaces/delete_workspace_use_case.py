"""
Delete Workspace Use Case
"""

import logging
from uuid import UUID

from pydantic import BaseModel

from src.app.services.ownership_verifier import OwnershipVerifier, not_found
from src.app.services.quota_guard import QuotaGuard
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workspace_context import WorkspaceContext
from src.libs.result import Result, Return

logger = logging.getLogger(__name__)


class DeleteWorkspaceResponse(BaseModel):
    success: bool = True


class DeleteWorkspaceUseCase:
    """
    Delete a workspace and all of its data.

    Business Logic:
    1. Verify the workspace record belongs to the tenant
    2. Delete each of its tables through the adapter (cascades to rows etc.)
    3. Release the freed rows from the tenant's counter
    4. Delete the workspace record
    """

    def __init__(self, uow: UnitOfWork, context: WorkspaceContext):
        self.uow = uow
        self.context = context

    async def execute(self, workspace_id: UUID) -> Result[DeleteWorkspaceResponse]:
        async with self.uow:
            result = await OwnershipVerifier(self.uow, self.context).workspace(workspace_id)
            if result.is_err():
                return result
            workspace = result.value
            if workspace is None:
                return Return.err(not_found("Workspace"))

            rows_removed = 0
            for table in await self.uow.data_tables.list_tables(workspace_id):
                rows_removed += await self.uow.data_tables.delete_table(table.id)

            await QuotaGuard(self.uow, self.context).record_rows(-rows_removed, workspace_id)
            await self.uow.workspaces.delete(workspace)
            await self.uow.commit()

            logger.info("Deleted workspace %s (%d rows)", workspace_id, rows_removed)
            return Return.ok(DeleteWorkspaceResponse())
