from fastapi import APIRouter, Depends

from src.api.error import unwrap
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workspace_context import WorkspaceContext
from src.app.use_cases.tenants import GetTenantInfoUseCase, TenantInfo
from src.depends import get_unit_of_work, get_workspace_context

router = APIRouter(prefix="/tenant", tags=["Tenant"])


@router.get("/info", response_model=TenantInfo)
async def get_tenant_info(
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Tenant Info

    Returns the caller's tenant with its quotas and current row usage.
    The API key digest is never included.
    """
    use_case = GetTenantInfoUseCase(uow)
    return unwrap(await use_case.execute(context.tenant_id))
