"""
Batch Use Cases

The batch RPC: many named operations in one request, one result each.
"""

from .dispatch_batch_use_case import DispatchBatchUseCase
from .dtos import BatchError, BatchOperationRequest, BatchRequest, BatchResponse, BatchResult

__all__ = [
    "DispatchBatchUseCase",
    "BatchRequest",
    "BatchOperationRequest",
    "BatchResponse",
    "BatchResult",
    "BatchError",
]
