from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import unwrap
from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.data_tables import SuccessResponse, TableResponse, TablesUseCase
from src.depends import get_ownership_verifier, get_unit_of_work
from src.domain.data_table_inputs import TableFields, UpdateTableInput

router = APIRouter(prefix="/tables", tags=["Tables"])


@router.get("", response_model=List[TableResponse])
async def list_tables(
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await TablesUseCase(uow, verifier).list())


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TableResponse)
async def create_table(
    request: TableFields,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    """
    Create Table

    The table is created in the request's workspace (X-Workspace-Id, or the
    tenant's default workspace).

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: QUOTA_EXCEEDED when the tenant's table limit is reached
    """
    return unwrap(await TablesUseCase(uow, verifier).create(request))


@router.get("/{table_id}", response_model=TableResponse)
async def get_table(
    table_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await TablesUseCase(uow, verifier).get(table_id))


@router.patch("/{table_id}", response_model=TableResponse)
async def update_table(
    table_id: UUID,
    request: UpdateTableInput,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await TablesUseCase(uow, verifier).update(table_id, request))


@router.delete("/{table_id}", response_model=SuccessResponse)
async def delete_table(
    table_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await TablesUseCase(uow, verifier).delete(table_id))
