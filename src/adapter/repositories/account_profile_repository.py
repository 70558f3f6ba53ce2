from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.account_profile_repository import IAccountProfileRepository
from src.domain.entities import AccountProfile


class AccountProfileRepository(IAccountProfileRepository):
    """AccountProfile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_account_id(self, account_id: UUID) -> Optional[AccountProfile]:
        """Get the profile belonging to an account"""
        stmt = select(AccountProfile).where(AccountProfile.account_id == account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def save(self, profile: AccountProfile) -> AccountProfile:
        """Insert or update a profile"""
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile
