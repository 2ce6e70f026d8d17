"""
Data Brain client SDK.
"""

from .client import DataBrainClient
from .errors import (
    AuthenticationError,
    ConflictError,
    DataBrainError,
    NetworkError,
    NotFoundError,
    QuotaExceededError,
    ValidationError,
)

__all__ = [
    "DataBrainClient",
    "DataBrainError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "QuotaExceededError",
    "ConflictError",
    "NetworkError",
]
