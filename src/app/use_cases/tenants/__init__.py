"""
Tenant Use Cases

Tenant-facing business logic.
"""

from .dtos import CreateTenantCommand, CreateTenantResponse, TenantInfo
from .get_tenant_info_use_case import GetTenantInfoUseCase

__all__ = [
    "GetTenantInfoUseCase",
    "CreateTenantCommand",
    "CreateTenantResponse",
    "TenantInfo",
]
