"""
Get Workspace Use Case
"""

from uuid import UUID

from src.app.services.ownership_verifier import OwnershipVerifier, not_found
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workspace_context import WorkspaceContext
from src.libs.result import Result, Return

from .dtos import WorkspaceResponse


class GetWorkspaceUseCase:
    def __init__(self, uow: UnitOfWork, context: WorkspaceContext):
        self.uow = uow
        self.context = context

    async def execute(self, workspace_id: UUID) -> Result[WorkspaceResponse]:
        async with self.uow:
            result = await OwnershipVerifier(self.uow, self.context).workspace(workspace_id)
            if result.is_err():
                return result
            # The fallback workspace has no record to show
            if result.value is None:
                return Return.err(not_found("Workspace"))
            return Return.ok(WorkspaceResponse.from_entity(result.value))
