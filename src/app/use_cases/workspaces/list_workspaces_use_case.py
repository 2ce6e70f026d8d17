"""
List Workspaces Use Case
"""

from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import WorkspaceResponse


class ListWorkspacesUseCase:
    """Workspace records of a tenant, oldest first (the fallback has no record)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> Result[List[WorkspaceResponse]]:
        async with self.uow:
            workspaces = await self.uow.workspaces.list_by_tenant_id(tenant_id)
            return Return.ok([WorkspaceResponse.from_entity(w) for w in workspaces])
