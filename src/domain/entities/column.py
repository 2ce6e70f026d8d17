"""
Column Entity
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

from .enums import ColumnType


class DataColumn(SQLModel, table=True):
    """Column entity - typed field of a table, ordered by position"""

    __tablename__ = "dt_columns"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    table_id: UUID = Field(foreign_key="dt_tables.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    type: ColumnType = Field(nullable=False)
    position: int = Field(default=0)
    width: int = Field(default=200)
    is_primary: bool = Field(default=False)
    config: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_column_table_position", "table_id", "position"),)
