"""
Base for use cases that act inside one tenant workspace.
"""

from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.quota_guard import QuotaGuard
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workspace_context import WorkspaceContext


class WorkspaceScopedUseCase:
    """
    Holds the unit of work, the request's ownership verifier and a quota guard.

    Every public method enters the unit of work itself, verifies each id it
    receives before touching the adapter, and commits only on success.
    """

    def __init__(self, uow: UnitOfWork, verifier: OwnershipVerifier):
        self.uow = uow
        self.verify = verifier
        self.quota = QuotaGuard(uow, verifier.context)

    @property
    def context(self) -> WorkspaceContext:
        return self.verify.context
