from typing import Optional

from sqlalchemy.exc import IntegrityError

from src.libs.result import Error, Result, Return

from src.app.services.audit_logger import AuditLogger, ClientInfo
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.audit_details import AccountRegisteredDetail
from src.domain.entities import Account, AuditAction
from .dtos import AccountSummary, RegisterCommand


class RegisterAccountUseCase:
    """
    Register Account Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[AccountSummary] (structured response)

    Business Logic:
    1. Normalize email to lower case
    2. Check if email already exists (case-insensitive)
    3. Hash password with bcrypt
    4. Create Account and commit
    5. Record account_registered audit event (best-effort)
    """

    def __init__(self, uow: UnitOfWork, hasher: Optional[PasswordHasher] = None):
        self.uow = uow
        self.hasher = hasher or PasswordHasher()
        self.audit = AuditLogger(uow)

    async def execute(
        self, command: RegisterCommand, client: ClientInfo
    ) -> Result[AccountSummary]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated name, email, password
            client: Originating address and user agent for the audit trail

        Returns:
            Result[AccountSummary] with the created account
            or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        email = command.email.strip().lower()

        async with self.uow:
            existing_account = await self.uow.accounts.get_by_email(email)
            if existing_account:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Account already exists")
                )

            account = Account(
                name=command.name,
                email=email,
                password_hash=self.hasher.hash(command.password),
            )
            try:
                account = await self.uow.accounts.create(account)
                await self.uow.commit()
            except IntegrityError:
                # concurrent registration won the unique email constraint
                await self.uow.rollback()
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Account already exists")
                )

            response = AccountSummary(
                id=account.id,
                name=account.name,
                email=account.email,
                created_at=account.created_at,
            )

            await self.audit.record(
                account_id=response.id,
                action=AuditAction.account_registered,
                detail=AccountRegisteredDetail(email=email),
                success=True,
                client=client,
            )

            return Return.ok(response)
