from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import AccountProfile


class IAccountProfileRepository(ABC):
    """AccountProfile repository interface - application layer"""

    @abstractmethod
    async def get_by_account_id(self, account_id: UUID) -> Optional[AccountProfile]:
        """Get the profile belonging to an account"""
        pass

    @abstractmethod
    async def save(self, profile: AccountProfile) -> AccountProfile:
        """Insert or update a profile"""
        pass
