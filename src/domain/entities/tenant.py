"""
Tenant Entity

Represents a credentialed account owning one or more workspaces.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

DEFAULT_QUOTA_ROWS = 100_000
DEFAULT_MAX_TABLES = 100


class Tenant(SQLModel, table=True):
    """
    Tenant entity - top-level credentialed account, unit of billing and quota.

    Business Rules:
    - Only the SHA-256 digest of the API key is stored; the plaintext key is
      returned once at creation and never again
    - Exactly one tenant matches a given digest
    - used_rows counts live rows across all of the tenant's workspaces
    - The tenant id doubles as its fallback workspace id
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    api_key_hash: str = Field(max_length=64)

    quota_rows: int = Field(default=DEFAULT_QUOTA_ROWS)
    used_rows: int = Field(default=0)
    max_tables: int = Field(default=DEFAULT_MAX_TABLES)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_tenant_api_key_hash", "api_key_hash", unique=True),)
