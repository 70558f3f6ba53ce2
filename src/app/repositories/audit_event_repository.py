from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """AuditEvent repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        pass

    @abstractmethod
    async def list_by_account(
        self, account_id: UUID, limit: int, offset: int = 0
    ) -> List[AuditEvent]:
        """Get a page of an account's audit events ordered by created_at DESC"""
        pass

    @abstractmethod
    async def count_by_account(self, account_id: UUID) -> int:
        """Count all audit events of an account"""
        pass
