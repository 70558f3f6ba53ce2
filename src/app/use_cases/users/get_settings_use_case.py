from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AccountProfile
from src.domain.identity import Identity
from .dtos import SettingsData


class GetSettingsUseCase:
    """Settings snapshot; profile defaults apply until the first settings update"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[SettingsData]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(identity.account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            profile = await self.uow.profiles.get_by_account_id(identity.account_id)
            if profile is None:
                profile = AccountProfile(account_id=identity.account_id)

            return Return.ok(SettingsData.from_entities(account, profile))
