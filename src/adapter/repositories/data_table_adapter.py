from typing import List, Optional, Sequence, Set
from uuid import UUID

from sqlalchemy import delete, func, or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.row_query import apply_query
from src.app.repositories.data_table_adapter import IDataTableAdapter
from src.domain.base import utc_now
from src.domain.data_table_inputs import (
    CreateColumnInput,
    CreateFileReferenceInput,
    CreateRelationInput,
    CreateRowInput,
    CreateSelectOptionInput,
    CreateTableInput,
    CreateViewInput,
    QueryResult,
    RowQueryOptions,
    UpdateColumnInput,
    UpdateSelectOptionInput,
    UpdateTableInput,
    UpdateViewInput,
)
from src.domain.entities import (
    DataColumn,
    DataRow,
    DataTable,
    DataView,
    FileReference,
    Relation,
    SelectOption,
)


class SqlModelDataTableAdapter(IDataTableAdapter):
    """Data-table adapter implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _save(self, entity):
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def _count(self, stmt) -> int:
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @staticmethod
    def _apply_updates(entity, updates) -> None:
        # None means "leave unchanged"
        for key, value in updates.model_dump(exclude_none=True).items():
            setattr(entity, key, value)
        if hasattr(entity, "updated_at"):
            entity.updated_at = utc_now()

    # ------------------------------------------------------------------ tables

    async def create_table(self, data: CreateTableInput) -> DataTable:
        table = DataTable(
            workspace_id=data.workspace_id,
            name=data.name,
            description=data.description,
            icon=data.icon,
        )
        return await self._save(table)

    async def get_table(self, table_id: UUID) -> Optional[DataTable]:
        stmt = select(DataTable).where(DataTable.id == table_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_table(self, table_id: UUID, updates: UpdateTableInput) -> DataTable:
        table = await self.get_table(table_id)
        if table is None:
            raise LookupError(f"Table {table_id} does not exist")
        self._apply_updates(table, updates)
        return await self._save(table)

    async def delete_table(self, table_id: UUID) -> int:
        row_ids = await self._row_ids_for_tables([table_id])
        column_ids = await self._column_ids_for_table(table_id)

        await self._delete_row_dependents(row_ids)
        if column_ids:
            await self.session.execute(
                delete(SelectOption).where(SelectOption.column_id.in_(column_ids))
            )
        await self.session.execute(delete(DataRow).where(DataRow.table_id == table_id))
        await self.session.execute(delete(DataColumn).where(DataColumn.table_id == table_id))
        await self.session.execute(delete(DataView).where(DataView.table_id == table_id))
        await self.session.execute(delete(DataTable).where(DataTable.id == table_id))
        await self.session.flush()
        return len(row_ids)

    async def list_tables(self, workspace_id: UUID) -> List[DataTable]:
        stmt = (
            select(DataTable)
            .where(DataTable.workspace_id == workspace_id)
            .order_by(DataTable.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_tables(self, workspace_ids: Sequence[UUID]) -> int:
        if not workspace_ids:
            return 0
        stmt = (
            select(func.count())
            .select_from(DataTable)
            .where(DataTable.workspace_id.in_(list(workspace_ids)))
        )
        return await self._count(stmt)

    # ----------------------------------------------------------------- columns

    async def create_column(self, data: CreateColumnInput) -> DataColumn:
        position = data.position
        if position is None:
            position = await self._count(
                select(func.count())
                .select_from(DataColumn)
                .where(DataColumn.table_id == data.table_id)
            )
        column = DataColumn(
            table_id=data.table_id,
            name=data.name,
            type=data.type,
            position=position,
            width=data.width or 200,
            is_primary=bool(data.is_primary),
            config=data.config,
        )
        return await self._save(column)

    async def get_column(self, column_id: UUID) -> Optional[DataColumn]:
        stmt = select(DataColumn).where(DataColumn.id == column_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_columns(self, table_id: UUID) -> List[DataColumn]:
        stmt = (
            select(DataColumn)
            .where(DataColumn.table_id == table_id)
            .order_by(DataColumn.position, DataColumn.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_column(self, column_id: UUID, updates: UpdateColumnInput) -> DataColumn:
        column = await self.get_column(column_id)
        if column is None:
            raise LookupError(f"Column {column_id} does not exist")
        self._apply_updates(column, updates)
        return await self._save(column)

    async def delete_column(self, column_id: UUID) -> None:
        column = await self.get_column(column_id)
        if column is None:
            return

        await self.session.execute(delete(SelectOption).where(SelectOption.column_id == column_id))
        await self.session.execute(delete(FileReference).where(FileReference.column_id == column_id))
        await self.session.execute(delete(Relation).where(Relation.column_id == column_id))

        key = str(column_id)
        rows = await self.session.execute(select(DataRow).where(DataRow.table_id == column.table_id))
        for row in rows.scalars().all():
            if key in row.cells:
                row.cells = {k: v for k, v in row.cells.items() if k != key}
                self.session.add(row)

        await self.session.delete(column)
        await self.session.flush()

    async def reorder_columns(self, table_id: UUID, column_ids: Sequence[UUID]) -> None:
        for position, column_id in enumerate(column_ids):
            await self.session.execute(
                update(DataColumn)
                .where(DataColumn.id == column_id, DataColumn.table_id == table_id)
                .values(position=position)
            )
        await self.session.flush()

    # -------------------------------------------------------------------- rows

    async def create_row(self, data: CreateRowInput) -> DataRow:
        row = DataRow(
            table_id=data.table_id,
            parent_row_id=data.parent_row_id,
            cells=dict(data.cells or {}),
        )
        return await self._save(row)

    async def get_row(self, row_id: UUID) -> Optional[DataRow]:
        stmt = select(DataRow).where(DataRow.id == row_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_rows(
        self, table_id: UUID, query: Optional[RowQueryOptions] = None
    ) -> QueryResult[DataRow]:
        query = query or RowQueryOptions()
        stmt = select(DataRow).where(DataRow.table_id == table_id)
        if not query.include_archived:
            stmt = stmt.where(DataRow.archived == False)  # noqa: E712
        if query.parent_row_id is not None:
            stmt = stmt.where(DataRow.parent_row_id == query.parent_row_id)
        elif not query.include_sub_items:
            stmt = stmt.where(DataRow.parent_row_id == None)  # noqa: E711
        stmt = stmt.order_by(DataRow.created_at)

        result = await self.session.execute(stmt)
        return apply_query(result.scalars().all(), query)

    async def update_row(self, row_id: UUID, cells: dict) -> DataRow:
        row = await self.get_row(row_id)
        if row is None:
            raise LookupError(f"Row {row_id} does not exist")
        row.cells = {**row.cells, **cells}
        row.updated_at = utc_now()
        return await self._save(row)

    async def delete_row(self, row_id: UUID) -> int:
        return await self.bulk_delete_rows([row_id])

    async def archive_row(self, row_id: UUID) -> None:
        await self.bulk_archive_rows([row_id])

    async def unarchive_row(self, row_id: UUID) -> None:
        await self.session.execute(
            update(DataRow).where(DataRow.id == row_id).values(archived=False, updated_at=utc_now())
        )
        await self.session.flush()

    async def bulk_create_rows(self, inputs: Sequence[CreateRowInput]) -> List[DataRow]:
        rows = [
            DataRow(table_id=data.table_id, parent_row_id=data.parent_row_id, cells=dict(data.cells or {}))
            for data in inputs
        ]
        self.session.add_all(rows)
        await self.session.flush()
        for row in rows:
            await self.session.refresh(row)
        return rows

    async def bulk_delete_rows(self, row_ids: Sequence[UUID]) -> int:
        doomed = await self._with_sub_items(row_ids)
        if not doomed:
            return 0
        await self._delete_row_dependents(doomed)
        await self.session.execute(delete(DataRow).where(DataRow.id.in_(list(doomed))))
        await self.session.flush()
        return len(doomed)

    async def bulk_archive_rows(self, row_ids: Sequence[UUID]) -> None:
        if not row_ids:
            return
        await self.session.execute(
            update(DataRow)
            .where(DataRow.id.in_(list(row_ids)))
            .values(archived=True, updated_at=utc_now())
        )
        await self.session.flush()

    async def count_rows(self, table_ids: Sequence[UUID]) -> int:
        if not table_ids:
            return 0
        stmt = (
            select(func.count())
            .select_from(DataRow)
            .where(DataRow.table_id.in_(list(table_ids)))
        )
        return await self._count(stmt)

    async def _with_sub_items(self, row_ids: Sequence[UUID]) -> Set[UUID]:
        result = await self.session.execute(select(DataRow.id).where(DataRow.id.in_(list(row_ids))))
        found: Set[UUID] = set(result.scalars().all())
        frontier = set(found)
        while frontier:
            children = await self.session.execute(
                select(DataRow.id).where(DataRow.parent_row_id.in_(list(frontier)))
            )
            frontier = set(children.scalars().all()) - found
            found |= frontier
        return found

    async def _row_ids_for_tables(self, table_ids: Sequence[UUID]) -> List[UUID]:
        result = await self.session.execute(
            select(DataRow.id).where(DataRow.table_id.in_(list(table_ids)))
        )
        return list(result.scalars().all())

    async def _column_ids_for_table(self, table_id: UUID) -> List[UUID]:
        result = await self.session.execute(
            select(DataColumn.id).where(DataColumn.table_id == table_id)
        )
        return list(result.scalars().all())

    async def _delete_row_dependents(self, row_ids) -> None:
        if not row_ids:
            return
        ids = list(row_ids)
        await self.session.execute(delete(FileReference).where(FileReference.row_id.in_(ids)))
        await self.session.execute(
            delete(Relation).where(
                or_(Relation.source_row_id.in_(ids), Relation.target_row_id.in_(ids))
            )
        )

    # ------------------------------------------------------------------- views

    async def create_view(self, data: CreateViewInput) -> DataView:
        position = data.position
        if position is None:
            position = await self._count(
                select(func.count()).select_from(DataView).where(DataView.table_id == data.table_id)
            )
        view = DataView(
            table_id=data.table_id,
            name=data.name,
            type=data.type,
            is_default=bool(data.is_default),
            position=position,
            config=data.config,
        )
        return await self._save(view)

    async def get_view(self, view_id: UUID) -> Optional[DataView]:
        stmt = select(DataView).where(DataView.id == view_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_views(self, table_id: UUID) -> List[DataView]:
        stmt = (
            select(DataView)
            .where(DataView.table_id == table_id)
            .order_by(DataView.position, DataView.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_view(self, view_id: UUID, updates: UpdateViewInput) -> DataView:
        view = await self.get_view(view_id)
        if view is None:
            raise LookupError(f"View {view_id} does not exist")
        self._apply_updates(view, updates)
        return await self._save(view)

    async def delete_view(self, view_id: UUID) -> None:
        await self.session.execute(delete(DataView).where(DataView.id == view_id))
        await self.session.flush()

    async def reorder_views(self, table_id: UUID, view_ids: Sequence[UUID]) -> None:
        for position, view_id in enumerate(view_ids):
            await self.session.execute(
                update(DataView)
                .where(DataView.id == view_id, DataView.table_id == table_id)
                .values(position=position)
            )
        await self.session.flush()

    # ---------------------------------------------------------- select options

    async def create_select_option(self, data: CreateSelectOptionInput) -> SelectOption:
        position = data.position
        if position is None:
            position = await self._count(
                select(func.count())
                .select_from(SelectOption)
                .where(SelectOption.column_id == data.column_id)
            )
        option = SelectOption(
            column_id=data.column_id, name=data.name, color=data.color, position=position
        )
        return await self._save(option)

    async def get_select_option(self, option_id: UUID) -> Optional[SelectOption]:
        stmt = select(SelectOption).where(SelectOption.id == option_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_select_options(self, column_id: UUID) -> List[SelectOption]:
        stmt = (
            select(SelectOption)
            .where(SelectOption.column_id == column_id)
            .order_by(SelectOption.position, SelectOption.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_select_option(
        self, option_id: UUID, updates: UpdateSelectOptionInput
    ) -> SelectOption:
        option = await self.get_select_option(option_id)
        if option is None:
            raise LookupError(f"Select option {option_id} does not exist")
        self._apply_updates(option, updates)
        return await self._save(option)

    async def delete_select_option(self, option_id: UUID) -> None:
        await self.session.execute(delete(SelectOption).where(SelectOption.id == option_id))
        await self.session.flush()

    async def reorder_select_options(self, column_id: UUID, option_ids: Sequence[UUID]) -> None:
        for position, option_id in enumerate(option_ids):
            await self.session.execute(
                update(SelectOption)
                .where(SelectOption.id == option_id, SelectOption.column_id == column_id)
                .values(position=position)
            )
        await self.session.flush()

    # --------------------------------------------------------------- relations

    async def create_relation(self, data: CreateRelationInput) -> Relation:
        stmt = select(Relation).where(
            Relation.source_row_id == data.source_row_id,
            Relation.column_id == data.source_column_id,
            Relation.target_row_id == data.target_row_id,
        )
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()
        if existing is not None:
            return existing
        relation = Relation(
            source_row_id=data.source_row_id,
            column_id=data.source_column_id,
            target_row_id=data.target_row_id,
        )
        return await self._save(relation)

    async def delete_relation(
        self, source_row_id: UUID, column_id: UUID, target_row_id: UUID
    ) -> None:
        await self.session.execute(
            delete(Relation).where(
                Relation.source_row_id == source_row_id,
                Relation.column_id == column_id,
                Relation.target_row_id == target_row_id,
            )
        )
        await self.session.flush()

    async def get_related_rows(self, row_id: UUID, column_id: UUID) -> List[DataRow]:
        stmt = (
            select(DataRow)
            .join(Relation, Relation.target_row_id == DataRow.id)
            .where(Relation.source_row_id == row_id, Relation.column_id == column_id)
            .order_by(Relation.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_relations_for_row(self, row_id: UUID) -> List[Relation]:
        stmt = (
            select(Relation)
            .where(Relation.source_row_id == row_id)
            .order_by(Relation.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    # --------------------------------------------------------- file references

    async def add_file_reference(self, data: CreateFileReferenceInput) -> FileReference:
        position = data.position
        if position is None:
            position = await self._count(
                select(func.count())
                .select_from(FileReference)
                .where(
                    FileReference.row_id == data.row_id,
                    FileReference.column_id == data.column_id,
                )
            )
        file_ref = FileReference(
            row_id=data.row_id,
            column_id=data.column_id,
            file_id=data.file_id,
            file_url=data.file_url,
            original_name=data.original_name,
            mime_type=data.mime_type,
            size_bytes=data.size_bytes,
            position=position,
            file_metadata=data.metadata,
        )
        return await self._save(file_ref)

    async def get_file_reference(self, file_ref_id: UUID) -> Optional[FileReference]:
        stmt = select(FileReference).where(FileReference.id == file_ref_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def remove_file_reference(self, file_ref_id: UUID) -> None:
        await self.session.execute(delete(FileReference).where(FileReference.id == file_ref_id))
        await self.session.flush()

    async def get_file_references(self, row_id: UUID, column_id: UUID) -> List[FileReference]:
        stmt = (
            select(FileReference)
            .where(FileReference.row_id == row_id, FileReference.column_id == column_id)
            .order_by(FileReference.position, FileReference.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def reorder_file_references(
        self, row_id: UUID, column_id: UUID, file_ref_ids: Sequence[UUID]
    ) -> None:
        for position, file_ref_id in enumerate(file_ref_ids):
            await self.session.execute(
                update(FileReference)
                .where(
                    FileReference.id == file_ref_id,
                    FileReference.row_id == row_id,
                    FileReference.column_id == column_id,
                )
                .values(position=position)
            )
        await self.session.flush()
