from typing import List
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status

from src.api.error import unwrap
from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.data_tables import ColumnResponse, ColumnsUseCase, SuccessResponse
from src.depends import get_ownership_verifier, get_unit_of_work
from src.domain.data_table_inputs import ColumnFields, UpdateColumnInput

router = APIRouter(tags=["Columns"])


@router.get("/tables/{table_id}/columns", response_model=List[ColumnResponse])
async def list_columns(
    table_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await ColumnsUseCase(uow, verifier).list(table_id))


@router.post(
    "/tables/{table_id}/columns",
    status_code=status.HTTP_201_CREATED,
    response_model=ColumnResponse,
)
async def create_column(
    table_id: UUID,
    request: ColumnFields,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await ColumnsUseCase(uow, verifier).create(table_id, request))


@router.put("/tables/{table_id}/columns/reorder", response_model=SuccessResponse)
async def reorder_columns(
    table_id: UUID,
    column_ids: List[UUID] = Body(..., min_length=1),
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    """
    Reorder Columns

    Body is the list of column ids in their new order. Ids of other tables
    are ignored.
    """
    return unwrap(await ColumnsUseCase(uow, verifier).reorder(table_id, column_ids))


@router.get("/columns/{column_id}", response_model=ColumnResponse)
async def get_column(
    column_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await ColumnsUseCase(uow, verifier).get(column_id))


@router.patch("/columns/{column_id}", response_model=ColumnResponse)
async def update_column(
    column_id: UUID,
    request: UpdateColumnInput,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await ColumnsUseCase(uow, verifier).update(column_id, request))


@router.delete("/columns/{column_id}", response_model=SuccessResponse)
async def delete_column(
    column_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    """Delete a column with its select options, cell values and relations"""
    return unwrap(await ColumnsUseCase(uow, verifier).delete(column_id))
