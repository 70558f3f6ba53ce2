"""
Security Log Use Case DTOs
"""

from datetime import datetime
from typing import Any, Dict, List
from uuid import UUID

from src.domain.base import CamelModel
from src.domain.entities import AuditEvent


class SecurityLogEntry(CamelModel):
    """Single audit event as shown to its owner"""

    id: UUID
    action: str
    details: Dict[str, Any]
    success: bool
    ip_address: str
    user_agent: str
    created_at: datetime

    @classmethod
    def from_entity(cls, event: AuditEvent) -> "SecurityLogEntry":
        return cls(
            id=event.id,
            action=event.action,
            details=event.details or {},
            success=event.success,
            ip_address=event.ip_address,
            user_agent=event.user_agent,
            created_at=event.created_at,
        )


class Pagination(CamelModel):
    total: int
    limit: int
    offset: int
    has_more: bool


class SecurityLogsResponse(CamelModel):
    """GET /user/security-logs response payload"""

    data: List[SecurityLogEntry]
    pagination: Pagination
