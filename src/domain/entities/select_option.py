"""
SelectOption Entity
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class SelectOption(SQLModel, table=True):
    """Choice of a select / multi_select column"""

    __tablename__ = "dt_select_options"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    column_id: UUID = Field(foreign_key="dt_columns.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    color: Optional[str] = Field(default=None, max_length=50)
    position: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
