from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.workspace_repository import IWorkspaceRepository
from src.domain.entities import Workspace


class WorkspaceRepository(IWorkspaceRepository):
    """Workspace repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, workspace_id: UUID) -> Optional[Workspace]:
        """Get workspace by ID"""
        stmt = select(Workspace).where(Workspace.id == workspace_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_tenant_and_slug(self, tenant_id: UUID, slug: str) -> Optional[Workspace]:
        """Get workspace by its per-tenant slug"""
        stmt = select(Workspace).where(
            Workspace.tenant_id == tenant_id, Workspace.slug == slug
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_tenant_id(self, tenant_id: UUID) -> List[Workspace]:
        """List a tenant's workspaces, oldest first"""
        stmt = (
            select(Workspace)
            .where(Workspace.tenant_id == tenant_id)
            .order_by(Workspace.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, workspace: Workspace) -> Workspace:
        """Create a new workspace"""
        self.session.add(workspace)
        await self.session.flush()
        await self.session.refresh(workspace)
        return workspace

    async def update(self, workspace: Workspace) -> Workspace:
        """Update existing workspace"""
        self.session.add(workspace)
        await self.session.flush()
        await self.session.refresh(workspace)
        return workspace

    async def delete(self, workspace: Workspace) -> None:
        """Delete workspace record"""
        await self.session.delete(workspace)
        await self.session.flush()
