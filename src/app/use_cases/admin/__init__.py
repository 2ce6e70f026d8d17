"""Admin use cases for system administration operations."""

from .create_tenant_use_case import CreateTenantUseCase

__all__ = [
    "CreateTenantUseCase",
]
