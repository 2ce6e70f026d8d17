from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class WorkspaceContext:
    """
    Identity resolved for one request.

    Holds plain values only, never ORM objects, so it stays valid after the
    session that produced it rolls back.
    """

    tenant_id: UUID
    workspace_id: UUID
    tenant_name: str = ""

    @property
    def is_fallback_workspace(self) -> bool:
        return self.workspace_id == self.tenant_id
