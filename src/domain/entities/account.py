"""
Account Entity

Represents a registered user of the application.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class Account(SQLModel, table=True):
    """
    Account entity - a registered user's persisted identity record.

    Business Rules:
    - Email is unique and stored lower-cased
    - Password stored as bcrypt hash only, never returned or logged
    - theme/language/timezone are account-level settings; the remaining
      preferences live on AccountProfile
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=101)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Basic profile info
    first_name: Optional[str] = Field(default=None, max_length=50)
    last_name: Optional[str] = Field(default=None, max_length=50)
    bio: Optional[str] = Field(default=None, max_length=500)
    location: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=50)
    website: Optional[str] = Field(default=None, max_length=2048)
    avatar: Optional[str] = Field(default=None, max_length=2048)

    # Account-level settings
    theme: str = Field(default="system", max_length=20)
    language: str = Field(default="en", max_length=20)
    timezone: str = Field(default="UTC", max_length=64)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_account_created_at", "created_at"),)

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, email={self.email!r})"
