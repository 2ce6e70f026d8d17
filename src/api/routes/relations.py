from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import unwrap
from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.data_tables import (
    RelationResponse,
    RelationsUseCase,
    RowResponse,
    SuccessResponse,
)
from src.depends import get_ownership_verifier, get_unit_of_work
from src.domain.data_table_inputs import CreateRelationInput, DeleteRelationInput

router = APIRouter(tags=["Relations"])


@router.post("/relations", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def create_relation(
    request: CreateRelationInput,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    """
    Create Relation

    Source row, relation column and target row must all be in the request's
    workspace. Creating an existing edge again is a no-op.
    """
    return unwrap(await RelationsUseCase(uow, verifier).create(request))


@router.delete("/relations", response_model=SuccessResponse)
async def delete_relation(
    request: DeleteRelationInput,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await RelationsUseCase(uow, verifier).delete(request))


@router.get("/rows/{row_id}/relations", response_model=List[RelationResponse])
async def get_relations_for_row(
    row_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await RelationsUseCase(uow, verifier).for_row(row_id))


@router.get("/rows/{row_id}/relations/{column_id}", response_model=List[RowResponse])
async def get_related_rows(
    row_id: UUID,
    column_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await RelationsUseCase(uow, verifier).related_rows(row_id, column_id))
