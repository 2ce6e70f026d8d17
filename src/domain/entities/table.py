"""
Table Entity

A structured-data table living in exactly one workspace.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class DataTable(SQLModel, table=True):
    """
    Table entity - root of the ownership chain.

    Business Rules:
    - workspace_id is the only place a workspace is recorded; columns, rows,
      views, options and file references derive theirs through the table
    - workspace_id may be a workspace record id or a tenant's fallback id
    """

    __tablename__ = "dt_tables"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    workspace_id: UUID = Field(nullable=False, index=True)

    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    icon: Optional[str] = Field(default=None, max_length=50)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
