"""
AccountProfile Entity

Professional information and notification/privacy preferences of an account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now

from .enums import ProfileVisibility


class AccountProfile(SQLModel, table=True):
    """
    AccountProfile entity - one-to-one extension of Account.

    Business Rules:
    - At most one profile per account (account_id is unique)
    - Created lazily on the first professional-info or settings update
    """

    __tablename__ = "account_profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    account_id: UUID = Field(foreign_key="accounts.id", unique=True, index=True)

    # Professional info
    occupation: Optional[str] = Field(default=None, max_length=100)
    company: Optional[str] = Field(default=None, max_length=100)
    industry: Optional[str] = Field(default=None, max_length=100)
    experience: Optional[str] = Field(default=None, max_length=20)
    linkedin_url: Optional[str] = Field(default=None, max_length=2048)
    github_url: Optional[str] = Field(default=None, max_length=2048)
    twitter_url: Optional[str] = Field(default=None, max_length=2048)

    # Notification preferences
    email_notifications: bool = Field(default=True)
    push_notifications: bool = Field(default=False)
    marketing_emails: bool = Field(default=False)
    security_alerts: bool = Field(default=True)

    # Privacy preferences
    profile_visibility: str = Field(default=ProfileVisibility.private.value, max_length=20)
    show_email: bool = Field(default=False)
    show_phone: bool = Field(default=False)
    show_location: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
