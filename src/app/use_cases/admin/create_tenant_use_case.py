"""
Use Case: Create Tenant

Admin endpoint to provision a tenant and issue its API key.
"""

import logging

from src.app.services.api_keys import API_KEY_PREFIX_LIVE, generate_api_key, hash_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tenants.dtos import CreateTenantCommand, CreateTenantResponse, TenantInfo
from src.domain.entities import Tenant
from src.domain.entities.tenant import DEFAULT_MAX_TABLES, DEFAULT_QUOTA_ROWS
from src.libs.result import Result, Return

logger = logging.getLogger(__name__)

MAX_KEY_ATTEMPTS = 5


class CreateTenantUseCase:
    """
    Provision a tenant.

    Business Logic:
    1. Generate a live API key (prefix + 32 random alphanumerics)
    2. Store only its salted SHA-256 digest
    3. Apply default quotas where the command leaves them out
    4. Return the plaintext key exactly once
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hash_salt: str = "",
        key_prefix: str = API_KEY_PREFIX_LIVE,
        default_quota_rows: int = DEFAULT_QUOTA_ROWS,
        default_max_tables: int = DEFAULT_MAX_TABLES,
    ):
        self.uow = uow
        self.hash_salt = hash_salt
        self.key_prefix = key_prefix
        self.default_quota_rows = default_quota_rows
        self.default_max_tables = default_max_tables

    async def execute(self, command: CreateTenantCommand) -> Result[CreateTenantResponse]:
        async with self.uow:
            # Digests are unique; regenerate on the (unlikely) collision
            for _ in range(MAX_KEY_ATTEMPTS):
                api_key = generate_api_key(self.key_prefix)
                digest = hash_api_key(api_key, self.hash_salt)
                if await self.uow.tenants.get_by_api_key_hash(digest) is None:
                    break
            else:
                raise RuntimeError("Could not generate a unique API key")

            tenant = Tenant(
                name=command.name,
                api_key_hash=digest,
                quota_rows=command.quota_rows or self.default_quota_rows,
                max_tables=command.max_tables or self.default_max_tables,
            )
            tenant = await self.uow.tenants.create(tenant)
            info = TenantInfo.from_entity(tenant)
            await self.uow.commit()

            logger.info("Created tenant %s", info.id)
            return Return.ok(CreateTenantResponse(tenant=info, api_key=api_key))
