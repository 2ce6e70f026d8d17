"""
FileReference Entity
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class FileReference(SQLModel, table=True):
    """
    File attached to one (row, column) cell.

    Business Rules:
    - Belongs to exactly one row; ownership is derived through that row's table
    - The file itself lives elsewhere; only its id, url and descriptors are kept
    """

    __tablename__ = "dt_file_refs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    row_id: UUID = Field(foreign_key="dt_rows.id", nullable=False)
    column_id: UUID = Field(foreign_key="dt_columns.id", nullable=False)

    file_id: str = Field(max_length=255)
    file_url: str
    original_name: str = Field(max_length=255)
    mime_type: str = Field(max_length=100)
    size_bytes: Optional[int] = Field(default=None)
    position: int = Field(default=0)

    # "metadata" is reserved on SQLModel classes
    file_metadata: Optional[dict] = Field(
        default=None, sa_column=Column(JSON)
    )

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_file_ref_row_column", "row_id", "column_id"),)
