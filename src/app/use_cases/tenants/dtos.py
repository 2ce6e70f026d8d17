"""
Tenant Use Case DTOs (Data Transfer Objects)

Command and Response classes for the tenant domain. Serialized with
camelCase keys.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field

from src.domain.data_table_inputs import CamelModel
from src.domain.entities import Tenant


# ============================================================================
# Command DTOs
# ============================================================================


class CreateTenantCommand(CamelModel):
    """Admin request to provision a tenant"""

    name: str = Field(..., min_length=1, max_length=100)
    quota_rows: Optional[int] = Field(default=None, gt=0)
    max_tables: Optional[int] = Field(default=None, gt=0)


# ============================================================================
# Response DTOs
# ============================================================================


class TenantInfo(CamelModel):
    """Public tenant information; never carries the key digest"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    quota_rows: int
    used_rows: int
    max_tables: int
    created_at: datetime

    @classmethod
    def from_entity(cls, tenant: Tenant) -> "TenantInfo":
        return cls.model_validate(tenant)


class CreateTenantResponse(CamelModel):
    """The plaintext key is only ever returned here"""

    tenant: TenantInfo
    api_key: str
