"""
Relation Entity
"""

from datetime import datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class Relation(SQLModel, table=True):
    """
    Edge between two rows through a relation-typed column.

    The (source_row_id, column_id, target_row_id) triple is the identity.
    """

    __tablename__ = "dt_relations"

    source_row_id: UUID = Field(primary_key=True)
    column_id: UUID = Field(primary_key=True)
    target_row_id: UUID = Field(primary_key=True, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
