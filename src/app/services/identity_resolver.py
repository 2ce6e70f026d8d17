"""
Identity Resolver

Turns the Authorization header (and optional workspace scope header) of a
request into a WorkspaceContext, or fails closed.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple
from uuid import UUID

from src.app.services.api_keys import API_KEY_PREFIX_LIVE, API_KEY_PREFIX_TEST, hash_api_key
from src.app.services.ownership_verifier import OwnershipVerifier, not_found
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workspace_context import WorkspaceContext
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

# Same error for missing, malformed, unknown and revoked keys
UNAUTHENTICATED = Error("UNAUTHORIZED", "Invalid or missing API key")

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class IdentitySettings:
    """Credential settings, built once at startup"""

    api_key_prefixes: Tuple[str, ...] = (API_KEY_PREFIX_LIVE, API_KEY_PREFIX_TEST)
    hash_salt: str = ""

    @classmethod
    def from_config(cls, config) -> "IdentitySettings":
        return cls(
            api_key_prefixes=(
                getattr(config, "API_KEY_PREFIX_LIVE", API_KEY_PREFIX_LIVE),
                getattr(config, "API_KEY_PREFIX_TEST", API_KEY_PREFIX_TEST),
            ),
            hash_salt=getattr(config, "API_KEY_HASH_SALT", ""),
        )

    def is_well_formed(self, api_key: str) -> bool:
        return any(
            api_key.startswith(prefix) and len(api_key) > len(prefix)
            for prefix in self.api_key_prefixes
        )


def extract_bearer(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


class IdentityResolver:
    """
    Resolve (tenant, workspace) for a request.

    Business Logic:
    1. Reject malformed keys without touching storage
    2. Look the tenant up by key digest
    3. Without a workspace hint, use the tenant's fallback workspace
    4. With a hint, require the workspace to belong to the tenant

    Read-only.
    """

    def __init__(self, uow: UnitOfWork, settings: IdentitySettings):
        self.uow = uow
        self.settings = settings

    async def resolve(
        self, authorization: Optional[str], workspace_hint: Optional[str] = None
    ) -> Result[WorkspaceContext]:
        api_key = extract_bearer(authorization)
        if api_key is None or not self.settings.is_well_formed(api_key):
            return Return.err(UNAUTHENTICATED)

        digest = hash_api_key(api_key, self.settings.hash_salt)

        async with self.uow:
            tenant = await self.uow.tenants.get_by_api_key_hash(digest)
            if tenant is None:
                logger.info("Rejected request with unknown API key")
                return Return.err(UNAUTHENTICATED)

            tenant_id = tenant.id
            fallback = WorkspaceContext(
                tenant_id=tenant_id, workspace_id=tenant_id, tenant_name=tenant.name
            )
            if not workspace_hint:
                return Return.ok(fallback)

            try:
                workspace_id = UUID(workspace_hint)
            except ValueError:
                return Return.err(not_found("Workspace"))

            check = await OwnershipVerifier(self.uow, fallback).workspace(workspace_id)
            if check.is_err():
                return check

            return Return.ok(
                WorkspaceContext(
                    tenant_id=tenant_id, workspace_id=workspace_id, tenant_name=tenant.name
                )
            )
