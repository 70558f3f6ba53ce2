"""
Change Password Use Case

Replaces the signed-in account's password after verifying the current one.
"""

from typing import Optional

from src.libs.result import Error, Result, Return
from src.app.services.audit_logger import AuditLogger, ClientInfo
from src.app.services.password_hasher import PasswordHasher
from src.app.services.password_policy import validate_password_change
from src.app.services.unit_of_work import UnitOfWork
from src.domain.audit_details import PasswordChangedDetail, PasswordChangeFailedDetail
from src.domain.base import utc_now
from src.domain.entities import AuditAction
from src.domain.identity import Identity
from .dtos import ChangePasswordCommand, StatusResponse


class ChangePasswordUseCase:
    """
    Use case for changing the password of the signed-in account.

    Business Rules:
    - Form is validated before storage is touched (no audit entry on failure)
    - New password: min 8 chars, upper-case, lower-case and digit
    - Confirmation must equal the new password
    - Wrong current password is audit-logged as password_change_failed
    - New password is hashed with bcrypt and committed before the
      password_changed audit event is written
    - Audit writes are best-effort and never fail the change itself
    """

    def __init__(self, uow: UnitOfWork, hasher: Optional[PasswordHasher] = None):
        self.uow = uow
        self.hasher = hasher or PasswordHasher()
        self.audit = AuditLogger(uow)

    async def execute(
        self, identity: Identity, command: ChangePasswordCommand, client: ClientInfo
    ) -> Result[StatusResponse]:
        """
        Execute change password use case.

        Args:
            identity: Authenticated account
            command: Current, new and confirmation passwords
            client: Originating address and user agent for the audit trail

        Returns:
            Result with confirmation status, or Error

        Errors:
            - INVALID_INPUT: Form validation failed (details per field)
            - ACCOUNT_NOT_FOUND: Account no longer exists
            - INVALID_CURRENT_PASSWORD: Current password does not match
        """
        field_errors = validate_password_change(
            command.current_password, command.new_password, command.confirm_password
        )
        if field_errors:
            return Return.err(Error("INVALID_INPUT", "Invalid input", field_errors))

        async with self.uow:
            account = await self.uow.accounts.get_by_id(identity.account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            if not self.hasher.verify(command.current_password, account.password_hash):
                await self.audit.record(
                    account_id=identity.account_id,
                    action=AuditAction.password_change_failed,
                    detail=PasswordChangeFailedDetail(),
                    success=False,
                    client=client,
                )
                return Return.err(
                    Error("INVALID_CURRENT_PASSWORD", "Current password is incorrect")
                )

            account.password_hash = self.hasher.hash(command.new_password)
            account.updated_at = utc_now()
            await self.uow.accounts.update(account)
            await self.uow.commit()

            await self.audit.record(
                account_id=identity.account_id,
                action=AuditAction.password_changed,
                detail=PasswordChangedDetail(),
                success=True,
                client=client,
            )

            return Return.ok(
                StatusResponse(status="success", message="Password updated successfully")
            )
