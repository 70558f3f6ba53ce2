"""
Get Profile Use Case

Profile overview of the signed-in account, including completion percentage.
"""

from typing import Optional

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account, AccountProfile
from src.domain.identity import Identity
from .dtos import AccountResponse, ProfessionalInfo, ProfileOverviewResponse


def calculate_profile_completion(
    account: Account, profile: Optional[AccountProfile]
) -> int:
    """Percentage of the tracked profile fields that are filled in"""
    fields = [
        account.first_name,
        account.last_name,
        account.bio,
        account.avatar,
        account.location,
        profile.occupation if profile else None,
        profile.company if profile else None,
        account.phone,
        account.website,
    ]
    completed = sum(1 for value in fields if value and str(value).strip())
    return round(completed / len(fields) * 100)


class GetProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Identity) -> Result[ProfileOverviewResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(identity.account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            profile = await self.uow.profiles.get_by_account_id(identity.account_id)
            event_count = await self.uow.audit_events.count_by_account(identity.account_id)

            return Return.ok(
                ProfileOverviewResponse(
                    account=AccountResponse.from_entity(account),
                    professional=ProfessionalInfo.from_entity(profile) if profile else None,
                    security_event_count=event_count,
                    profile_completion=calculate_profile_completion(account, profile),
                )
            )
