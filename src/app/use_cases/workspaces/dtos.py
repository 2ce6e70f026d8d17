"""
Workspace Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import Field, field_validator

from src.domain.data_table_inputs import CamelModel
from src.domain.entities import Workspace

SLUG_PATTERN = r"^[a-z0-9][a-z0-9-]*[a-z0-9]$|^[a-z0-9]$"


# ============================================================================
# Command DTOs
# ============================================================================


class CreateWorkspaceCommand(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=100, pattern=SLUG_PATTERN)
    quota_rows: Optional[int] = Field(default=None, gt=0)
    metadata: Optional[Dict[str, Any]] = None


class UpdateWorkspaceCommand(CamelModel):
    """Fields left out are not changed; a null quotaRows or metadata clears it"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    quota_rows: Optional[int] = Field(default=None, gt=0)
    metadata: Optional[Dict[str, Any]] = None

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("name cannot be null")
        return value


# ============================================================================
# Response DTOs
# ============================================================================


class WorkspaceResponse(CamelModel):
    id: UUID
    tenant_id: UUID
    name: str
    slug: str
    quota_rows: Optional[int] = None
    used_rows: int
    metadata: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, workspace: Workspace) -> "WorkspaceResponse":
        return cls(
            id=workspace.id,
            tenant_id=workspace.tenant_id,
            name=workspace.name,
            slug=workspace.slug,
            quota_rows=workspace.quota_rows,
            used_rows=workspace.used_rows,
            metadata=workspace.workspace_metadata,
            created_at=workspace.created_at,
            updated_at=workspace.updated_at,
        )
