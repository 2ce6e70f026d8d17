"""
Errors raised by the Data Brain client.
"""

from typing import Any, Dict, List, Optional


class DataBrainError(Exception):
    def __init__(
        self,
        message: str,
        code: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details


class AuthenticationError(DataBrainError):
    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, "AUTHENTICATION_ERROR", 401)


class NotFoundError(DataBrainError):
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, "NOT_FOUND", 404)


class ValidationError(DataBrainError):
    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message, "VALIDATION_ERROR", 400, {"errors": errors})
        self.errors = errors


class QuotaExceededError(DataBrainError):
    def __init__(self, message: str = "Quota exceeded"):
        super().__init__(message, "QUOTA_EXCEEDED", 403)


class ConflictError(DataBrainError):
    def __init__(self, message: str = "Conflict"):
        super().__init__(message, "CONFLICT", 409)


class NetworkError(DataBrainError):
    def __init__(
        self, message: str = "Network error occurred", original_error: Optional[BaseException] = None
    ):
        details = {"originalError": str(original_error)} if original_error else None
        super().__init__(message, "NETWORK_ERROR", None, details)
        self.original_error = original_error


def parse_api_error(status_code: int, body: Any) -> DataBrainError:
    """Map an error envelope {error: {code, message, details}} to an exception"""
    error = body.get("error") if isinstance(body, dict) else None
    error = error if isinstance(error, dict) else {}
    code = error.get("code")
    message = error.get("message")
    details = error.get("details")

    if code == "UNAUTHORIZED":
        return AuthenticationError(message or "Authentication failed")
    if code == "NOT_FOUND":
        return NotFoundError(message or "Resource not found")
    if code == "VALIDATION_ERROR":
        errors = details.get("errors") if isinstance(details, dict) else None
        return ValidationError(message or "Validation failed", errors)
    if code == "QUOTA_EXCEEDED":
        return QuotaExceededError(message or "Quota exceeded")
    if code == "CONFLICT":
        return ConflictError(message or "Conflict")
    return DataBrainError(message or "An error occurred", code or "UNKNOWN_ERROR", status_code, details)
