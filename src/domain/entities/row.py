"""
Row Entity
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class DataRow(SQLModel, table=True):
    """
    Row entity - one record of a table.

    Business Rules:
    - cells maps column id (as string) to the cell value
    - parent_row_id, when set, points at a row of the same table
    - archived rows are hidden from queries unless explicitly requested
    """

    __tablename__ = "dt_rows"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    table_id: UUID = Field(foreign_key="dt_tables.id", nullable=False, index=True)
    parent_row_id: Optional[UUID] = Field(default=None, index=True)

    cells: dict = Field(default_factory=dict, sa_column=Column(JSON))
    archived: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_row_table_archived", "table_id", "archived"),)
