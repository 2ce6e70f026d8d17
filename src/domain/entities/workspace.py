"""
Workspace Entity

Named scoping unit beneath a tenant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class Workspace(SQLModel, table=True):
    """
    Workspace entity - default unit of data isolation for tables.

    Business Rules:
    - tenant_id never changes after creation
    - slug is unique per tenant
    - quota_rows is optional; when set it caps rows in this workspace on top
      of the tenant quota
    """

    __tablename__ = "workspaces"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    slug: str = Field(max_length=100)

    quota_rows: Optional[int] = Field(default=None)
    used_rows: int = Field(default=0)

    # "metadata" is reserved on SQLModel classes
    workspace_metadata: Optional[dict] = Field(
        default=None, sa_column=Column(JSON)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_workspace_tenant_slug", "tenant_id", "slug", unique=True),
    )
