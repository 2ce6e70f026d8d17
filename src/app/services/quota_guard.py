"""
Quota Guard

Enforces the tenant's table limit and row quota (plus the optional quota of
a workspace record) and keeps used_rows counters current.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workspace_context import WorkspaceContext
from src.domain.base import utc_now
from src.domain.entities import Tenant, Workspace
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class QuotaGuard:
    def __init__(self, uow: UnitOfWork, context: WorkspaceContext):
        self.uow = uow
        self.context = context

    async def _tenant(self) -> Optional[Tenant]:
        return await self.uow.tenants.get_by_id(self.context.tenant_id)

    async def _workspace(self, workspace_id: UUID) -> Optional[Workspace]:
        if workspace_id == self.context.tenant_id:
            return None
        return await self.uow.workspaces.get_by_id(workspace_id)

    async def ensure_table_capacity(self) -> Result[None]:
        tenant = await self._tenant()
        if tenant is None:
            return Return.err(Error("NOT_FOUND", "Tenant not found"))

        workspaces = await self.uow.workspaces.list_by_tenant_id(tenant.id)
        workspace_ids = [tenant.id] + [workspace.id for workspace in workspaces]
        table_count = await self.uow.data_tables.count_tables(workspace_ids)

        if table_count >= tenant.max_tables:
            logger.info("Table limit reached for tenant %s", tenant.id)
            return Return.err(
                Error("QUOTA_EXCEEDED", f"Table limit of {tenant.max_tables} reached")
            )
        return Return.ok(None)

    async def ensure_row_capacity(self, count: int = 1) -> Result[None]:
        tenant = await self._tenant()
        if tenant is None:
            return Return.err(Error("NOT_FOUND", "Tenant not found"))

        if tenant.used_rows + count > tenant.quota_rows:
            logger.info("Row quota exceeded for tenant %s", tenant.id)
            return Return.err(
                Error("QUOTA_EXCEEDED", f"Row quota of {tenant.quota_rows} exceeded")
            )

        workspace = await self._workspace(self.context.workspace_id)
        if (
            workspace is not None
            and workspace.quota_rows is not None
            and workspace.used_rows + count > workspace.quota_rows
        ):
            return Return.err(
                Error("QUOTA_EXCEEDED", f"Workspace row quota of {workspace.quota_rows} exceeded")
            )
        return Return.ok(None)

    async def record_rows(self, delta: int, workspace_id: Optional[UUID] = None) -> None:
        """Apply a row-count change to the tenant and workspace counters"""
        if delta == 0:
            return

        tenant = await self._tenant()
        if tenant is not None:
            tenant.used_rows = max(0, tenant.used_rows + delta)
            tenant.updated_at = utc_now()
            await self.uow.tenants.update(tenant)

        workspace = await self._workspace(workspace_id or self.context.workspace_id)
        if workspace is not None:
            workspace.used_rows = max(0, workspace.used_rows + delta)
            workspace.updated_at = utc_now()
            await self.uow.workspaces.update(workspace)
