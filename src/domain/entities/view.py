"""
View Entity
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from src.domain.base import utc_now

from .enums import ViewType


class DataView(SQLModel, table=True):
    """View entity - saved projection/sort/filter configuration of a table"""

    __tablename__ = "dt_views"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    table_id: UUID = Field(foreign_key="dt_tables.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    type: ViewType = Field(nullable=False)
    is_default: bool = Field(default=False)
    position: int = Field(default=0)
    config: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
