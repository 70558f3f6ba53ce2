"""
Update Profile Use Case

Handles the two profile sections: basic info (on Account) and
professional info (on AccountProfile).
"""

from typing import Optional

from src.libs.result import Error, Result, Return
from src.app.services.audit_logger import AuditLogger, ClientInfo
from src.app.services.unit_of_work import UnitOfWork
from src.domain.audit_details import ProfileUpdatedDetail
from src.domain.base import utc_now
from src.domain.entities import AccountProfile, AuditAction
from src.domain.identity import Identity
from .dtos import (
    AccountResponse,
    BasicInfoCommand,
    ProfessionalInfoCommand,
    ProfileUpdateResponse,
)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    return value or None


class UpdateProfileUseCase:
    """
    Use case for editing the signed-in account's profile.

    Business Rules:
    - Empty optional values are stored as NULL
    - Basic update rewrites the display name as "first last"
    - Professional info is upserted (profile row created on first write)
    - Both sections log PROFILE_UPDATED with the section name
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.audit = AuditLogger(uow)

    async def update_basic_info(
        self, identity: Identity, command: BasicInfoCommand, client: ClientInfo
    ) -> Result[ProfileUpdateResponse]:
        """
        Merge basic info into the account.

        Returns:
            Result with the updated account record, or Error(ACCOUNT_NOT_FOUND)
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_id(identity.account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            account.first_name = command.first_name
            account.last_name = command.last_name
            account.name = f"{command.first_name} {command.last_name}"
            account.bio = _blank_to_none(command.bio)
            account.location = _blank_to_none(command.location)
            account.website = _blank_to_none(command.website)
            account.phone = _blank_to_none(command.phone)
            account.updated_at = utc_now()

            account = await self.uow.accounts.update(account)
            await self.uow.commit()

            response = ProfileUpdateResponse(
                status="success",
                message="Basic information updated successfully",
                account=AccountResponse.from_entity(account),
            )

            await self.audit.record(
                account_id=identity.account_id,
                action=AuditAction.profile_updated,
                detail=ProfileUpdatedDetail(section="basic"),
                success=True,
                client=client,
            )

            return Return.ok(response)

    async def update_professional_info(
        self, identity: Identity, command: ProfessionalInfoCommand, client: ClientInfo
    ) -> Result[ProfileUpdateResponse]:
        """
        Upsert professional info on the account's profile.

        Returns:
            Result with status message, or Error(ACCOUNT_NOT_FOUND)
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_id(identity.account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            profile = await self.uow.profiles.get_by_account_id(identity.account_id)
            if profile is None:
                profile = AccountProfile(account_id=identity.account_id)

            profile.occupation = _blank_to_none(command.occupation)
            profile.company = _blank_to_none(command.company)
            profile.industry = _blank_to_none(command.industry)
            profile.experience = command.experience.value if command.experience else None
            profile.linkedin_url = _blank_to_none(command.linkedin_url)
            profile.github_url = _blank_to_none(command.github_url)
            profile.twitter_url = _blank_to_none(command.twitter_url)
            profile.updated_at = utc_now()

            await self.uow.profiles.save(profile)
            await self.uow.commit()

            await self.audit.record(
                account_id=identity.account_id,
                action=AuditAction.profile_updated,
                detail=ProfileUpdatedDetail(section="professional"),
                success=True,
                client=client,
            )

            return Return.ok(
                ProfileUpdateResponse(
                    status="success",
                    message="Professional information updated successfully",
                )
            )
