"""
Update Settings Use Case

Writes the account's preference set across Account and AccountProfile.
"""

from src.libs.result import Error, Result, Return
from src.app.services.audit_logger import AuditLogger, ClientInfo
from src.app.services.unit_of_work import UnitOfWork
from src.domain.audit_details import SettingsUpdatedDetail
from src.domain.base import utc_now
from src.domain.entities import AccountProfile, AuditAction
from src.domain.identity import Identity
from .dtos import SettingsData, SettingsUpdateResponse


class UpdateSettingsUseCase:
    """
    Use case for replacing the signed-in account's settings.

    Business Rules:
    - theme, language and timezone live on Account (updated_at refreshed)
    - notification and privacy flags are upserted on AccountProfile
    - settings_updated audit event lists the fields that actually changed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.audit = AuditLogger(uow)

    async def execute(
        self, identity: Identity, settings: SettingsData, client: ClientInfo
    ) -> Result[SettingsUpdateResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(identity.account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            profile = await self.uow.profiles.get_by_account_id(identity.account_id)
            if profile is None:
                profile = AccountProfile(account_id=identity.account_id)

            changes = settings.changed_fields(SettingsData.from_entities(account, profile))
            now = utc_now()

            account.theme = settings.theme.value
            account.language = settings.language
            account.timezone = settings.timezone
            account.updated_at = now
            await self.uow.accounts.update(account)

            profile.email_notifications = settings.email_notifications
            profile.push_notifications = settings.push_notifications
            profile.marketing_emails = settings.marketing_emails
            profile.security_alerts = settings.security_alerts
            profile.profile_visibility = settings.profile_visibility.value
            profile.show_email = settings.show_email
            profile.show_phone = settings.show_phone
            profile.show_location = settings.show_location
            profile.updated_at = now
            await self.uow.profiles.save(profile)

            await self.uow.commit()

            await self.audit.record(
                account_id=identity.account_id,
                action=AuditAction.settings_updated,
                detail=SettingsUpdatedDetail(changes=changes, timestamp=now),
                success=True,
                client=client,
            )

            return Return.ok(
                SettingsUpdateResponse(
                    status="success",
                    message="Settings updated successfully",
                    changes=changes,
                )
            )
