"""
Create Workspace Use Case
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Workspace
from src.libs.result import Error, Result, Return

from .dtos import CreateWorkspaceCommand, WorkspaceResponse

logger = logging.getLogger(__name__)


class CreateWorkspaceUseCase:
    """
    Create a workspace under a tenant.

    Business Rules:
    - Slug is unique per tenant (CONFLICT otherwise)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: CreateWorkspaceCommand
    ) -> Result[WorkspaceResponse]:
        async with self.uow:
            existing = await self.uow.workspaces.get_by_tenant_and_slug(tenant_id, command.slug)
            if existing is not None:
                return Return.err(
                    Error("CONFLICT", f"Workspace with slug '{command.slug}' already exists")
                )

            workspace = Workspace(
                tenant_id=tenant_id,
                name=command.name,
                slug=command.slug,
                quota_rows=command.quota_rows,
                workspace_metadata=command.metadata,
            )
            workspace = await self.uow.workspaces.create(workspace)
            response = WorkspaceResponse.from_entity(workspace)
            await self.uow.commit()

            logger.info("Created workspace %s for tenant %s", response.id, tenant_id)
            return Return.ok(response)
