"""
Admin API Routes - System Administration Endpoints

These endpoints are for internal service integrations (tenant provisioning).
Authentication is via the Admin API Key, not tenant API keys.
"""

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import unwrap
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import CreateTenantUseCase
from src.app.use_cases.tenants import CreateTenantCommand, CreateTenantResponse
from src.depends import get_identity_settings, get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/tenants",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateTenantResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def create_tenant(
    request: CreateTenantCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    settings=Depends(get_identity_settings),
):
    """
    Create Tenant

    Provisions a tenant and returns its API key. The key is shown only in
    this response.

    Requires: Authorization: Bearer <admin key>

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 401 Unauthorized: Missing or invalid admin API key
    """
    use_case = CreateTenantUseCase(
        uow,
        hash_salt=settings.hash_salt,
        key_prefix=settings.api_key_prefixes[0],
        default_quota_rows=ApplicationConfig.DEFAULT_QUOTA_ROWS,
        default_max_tables=ApplicationConfig.DEFAULT_MAX_TABLES,
    )
    return unwrap(await use_case.execute(request))
