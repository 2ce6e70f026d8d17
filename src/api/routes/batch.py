"""
Batch RPC Route

POST /rpc/batch runs up to BATCH_MAX_OPERATIONS named operations in order,
each with its own success or failure result.
"""

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import ClientError
from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.batch import BatchRequest, BatchResponse, DispatchBatchUseCase
from src.depends import get_ownership_verifier, get_unit_of_work
from src.libs.result import Error

router = APIRouter(prefix="/rpc", tags=["Batch"])


@router.post("/batch", response_model=BatchResponse)
async def run_batch(
    request: BatchRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    """
    Run Batch

    The whole batch is rejected (400, nothing executed) for an empty list,
    too many operations, or an unknown method name. Otherwise every
    operation runs, sequentially, with the same ownership and quota checks as
    its single-resource route; a failing operation does not stop the others
    and does not undo earlier ones.

    Returns:
        {results: [{success, data} | {success, error}]} in input order
    """
    max_operations = ApplicationConfig.BATCH_MAX_OPERATIONS
    if len(request.operations) > max_operations:
        raise ClientError(
            Error(
                "VALIDATION_ERROR",
                f"A batch may contain at most {max_operations} operations",
            ),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    use_case = DispatchBatchUseCase(uow, verifier)
    return await use_case.execute(request)
