from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Workspace


class IWorkspaceRepository(ABC):
    """Workspace repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, workspace_id: UUID) -> Optional[Workspace]:
        """Get workspace by ID"""
        pass

    @abstractmethod
    async def get_by_tenant_and_slug(self, tenant_id: UUID, slug: str) -> Optional[Workspace]:
        """Get workspace by its per-tenant slug"""
        pass

    @abstractmethod
    async def list_by_tenant_id(self, tenant_id: UUID) -> List[Workspace]:
        """List a tenant's workspaces, oldest first"""
        pass

    @abstractmethod
    async def create(self, workspace: Workspace) -> Workspace:
        """Create a new workspace"""
        pass

    @abstractmethod
    async def update(self, workspace: Workspace) -> Workspace:
        """Update existing workspace"""
        pass

    @abstractmethod
    async def delete(self, workspace: Workspace) -> None:
        """Delete workspace record"""
        pass
