"""
Update Workspace Use Case
"""

from uuid import UUID

from src.app.services.ownership_verifier import OwnershipVerifier, not_found
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workspace_context import WorkspaceContext
from src.domain.base import utc_now
from src.libs.result import Error, Result, Return

from .dtos import UpdateWorkspaceCommand, WorkspaceResponse


class UpdateWorkspaceUseCase:
    """
    Update name, row quota or metadata of a workspace.

    Business Rules:
    - At least one field must be given (BAD_REQUEST otherwise)
    - An explicit null quota or metadata clears it
    - Slug and tenant never change
    """

    def __init__(self, uow: UnitOfWork, context: WorkspaceContext):
        self.uow = uow
        self.context = context

    async def execute(
        self, workspace_id: UUID, command: UpdateWorkspaceCommand
    ) -> Result[WorkspaceResponse]:
        updates = command.model_dump(exclude_unset=True)
        if not updates:
            return Return.err(Error("BAD_REQUEST", "No fields to update"))

        async with self.uow:
            result = await OwnershipVerifier(self.uow, self.context).workspace(workspace_id)
            if result.is_err():
                return result
            workspace = result.value
            if workspace is None:
                return Return.err(not_found("Workspace"))

            if "name" in updates:
                workspace.name = updates["name"]
            if "quota_rows" in updates:
                workspace.quota_rows = updates["quota_rows"]
            if "metadata" in updates:
                workspace.workspace_metadata = updates["metadata"]
            workspace.updated_at = utc_now()

            workspace = await self.uow.workspaces.update(workspace)
            response = WorkspaceResponse.from_entity(workspace)
            await self.uow.commit()
            return Return.ok(response)
