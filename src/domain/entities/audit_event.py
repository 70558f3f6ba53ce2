"""
AuditEvent Entity

Immutable log of security-relevant account actions.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utc_now


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - immutable record of a security-relevant action.

    Business Rules:
    - Immutable (never updated or deleted)
    - Owned by exactly one account
    - details holds the JSON form of the action's detail schema
    - ip_address/user_agent are "unknown" when the request did not carry them
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    account_id: UUID = Field(foreign_key="accounts.id", index=True)

    action: str = Field(max_length=100)  # e.g., "password_changed"
    details: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    success: bool = Field(default=True)

    ip_address: str = Field(default="unknown", max_length=255)
    user_agent: str = Field(default="unknown", max_length=1024)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_account_action", "account_id", "action"),
    )
