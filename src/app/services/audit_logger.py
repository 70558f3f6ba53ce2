"""
Audit Logger

Appends AuditEvent rows for security-relevant account actions.
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.audit_details import DETAIL_SCHEMAS, AuditDetail
from src.domain.entities import AuditAction, AuditEvent

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"


@dataclass(frozen=True)
class ClientInfo:
    """Originating network address and client agent of a request"""

    ip_address: str = UNKNOWN
    user_agent: str = UNKNOWN


class AuditLogger:
    """
    Best-effort audit trail writer.

    Each record is written and committed on its own, after the primary
    operation has committed. A failed audit write is logged and rolled back
    but never propagated, so it cannot turn a completed change into an error.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record(
        self,
        account_id: UUID,
        action: AuditAction,
        detail: AuditDetail,
        success: bool,
        client: ClientInfo,
    ) -> bool:
        """
        Append one audit event.

        Returns:
            True if the event was committed, False if the write failed

        Raises:
            ValueError: detail is not the schema registered for action
        """
        expected = DETAIL_SCHEMAS[action]
        if not isinstance(detail, expected):
            raise ValueError(
                f"{action.value} expects {expected.__name__}, got {type(detail).__name__}"
            )

        audit_event = AuditEvent(
            account_id=account_id,
            action=action.value,
            details=detail.model_dump(mode="json"),
            success=success,
            ip_address=client.ip_address,
            user_agent=client.user_agent,
        )

        try:
            await self.uow.audit_events.create(audit_event)
            await self.uow.commit()
        except Exception:
            logger.exception(
                "Failed to record audit event %s for account %s", action.value, account_id
            )
            try:
                await self.uow.rollback()
            except Exception:
                logger.exception("Rollback after failed audit write also failed")
            return False

        return True
