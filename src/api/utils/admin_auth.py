"""
Admin API Key Authentication

Validates the admin key for system administration endpoints.
"""

import hmac
from typing import Optional

from fastapi import Header, status

from config import ApplicationConfig
from src.api.error import ClientError
from src.app.services.identity_resolver import extract_bearer
from src.libs.result import Error

ADMIN_UNAUTHORIZED = Error("UNAUTHORIZED", "Invalid or missing admin API key")


async def verify_admin_api_key(authorization: Optional[str] = Header(None)):
    """
    Verify the admin key from the Authorization: Bearer header.

    An empty ADMIN_API_KEY disables the admin endpoints.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid
    """
    expected = ApplicationConfig.ADMIN_API_KEY
    provided = extract_bearer(authorization)

    if not expected or provided is None:
        raise ClientError(ADMIN_UNAUTHORIZED, status_code=status.HTTP_401_UNAUTHORIZED)

    if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        raise ClientError(ADMIN_UNAUTHORIZED, status_code=status.HTTP_401_UNAUTHORIZED)

    return True
