"""
Registration Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand: Input to use case (validated business intent)
- AccountSummary: Output from use case (structured result)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.domain.base import CamelModel


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    name: str
    email: str
    password: str


class AccountSummary(CamelModel):
    """Created account in registration response"""

    id: UUID
    name: str
    email: str
    created_at: datetime
