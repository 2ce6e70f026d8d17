"""
Get Tenant Info Use Case
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import TenantInfo


class GetTenantInfoUseCase:
    """Read the caller's own tenant record, with current row usage"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> Result[TenantInfo]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(Error("NOT_FOUND", "Tenant not found"))
            return Return.ok(TenantInfo.from_entity(tenant))
