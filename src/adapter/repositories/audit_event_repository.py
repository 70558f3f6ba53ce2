from typing import List
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.domain.entities import AuditEvent


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        self.session.add(audit_event)
        await self.session.flush()
        await self.session.refresh(audit_event)
        return audit_event

    async def list_by_account(
        self, account_id: UUID, limit: int, offset: int = 0
    ) -> List[AuditEvent]:
        """Get a page of an account's audit events ordered by created_at DESC"""
        stmt = (
            select(AuditEvent)
            .where(AuditEvent.account_id == account_id)
            .order_by(AuditEvent.created_at.desc(), AuditEvent.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_account(self, account_id: UUID) -> int:
        """Count all audit events of an account"""
        stmt = select(func.count()).select_from(AuditEvent).where(
            AuditEvent.account_id == account_id
        )
        result = await self.session.exec(stmt)
        return result.one()
