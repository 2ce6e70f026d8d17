from typing import List
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status

from src.api.error import unwrap
from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.data_tables import (
    FileReferenceResponse,
    FileReferencesUseCase,
    SuccessResponse,
)
from src.depends import get_ownership_verifier, get_unit_of_work
from src.domain.data_table_inputs import CreateFileReferenceInput

router = APIRouter(tags=["File References"])


@router.post(
    "/file-refs",
    status_code=status.HTTP_201_CREATED,
    response_model=FileReferenceResponse,
)
async def add_file_reference(
    request: CreateFileReferenceInput,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    """
    Add File Reference

    Records metadata of an externally stored file on a (row, column) cell.
    File contents are never uploaded here.
    """
    return unwrap(await FileReferencesUseCase(uow, verifier).add(request))


@router.delete("/file-refs/{file_ref_id}", response_model=SuccessResponse)
async def remove_file_reference(
    file_ref_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await FileReferencesUseCase(uow, verifier).remove(file_ref_id))


@router.get("/rows/{row_id}/files/{column_id}", response_model=List[FileReferenceResponse])
async def get_file_references(
    row_id: UUID,
    column_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await FileReferencesUseCase(uow, verifier).list(row_id, column_id))


@router.put("/rows/{row_id}/files/{column_id}/reorder", response_model=SuccessResponse)
async def reorder_file_references(
    row_id: UUID,
    column_id: UUID,
    file_ref_ids: List[UUID] = Body(..., min_length=1),
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(
        await FileReferencesUseCase(uow, verifier).reorder(row_id, column_id, file_ref_ids)
    )
