"""
Get Security Logs Use Case

Retrieves the signed-in account's own audit trail with offset pagination.
"""

from src.libs.result import Error, Result, Return
from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.domain.identity import Identity
from .dtos import Pagination, SecurityLogEntry, SecurityLogsResponse


class GetSecurityLogsUseCase:
    """
    Use case for listing an account's security activity.

    Business Rules:
    - Results are account-scoped (only the caller's own events)
    - Results ordered by newest first
    - limit is capped at SECURITY_LOG_MAX_LIMIT (50) whatever was requested
    - has_more is true iff offset + returned < total
    """

    def __init__(self, uow: UnitOfWork, max_limit: int = ApplicationConfig.SECURITY_LOG_MAX_LIMIT):
        self.uow = uow
        self.max_limit = max_limit

    async def execute(
        self,
        identity: Identity,
        limit: int = ApplicationConfig.SECURITY_LOG_DEFAULT_LIMIT,
        offset: int = 0,
    ) -> Result[SecurityLogsResponse]:
        """
        Execute get security logs use case.

        Args:
            identity: Authenticated account
            limit: Requested page size (capped)
            offset: Number of newest events to skip

        Returns:
            Result with events page and pagination metadata, or
            Error(INVALID_INPUT) for a non-positive limit or negative offset
        """
        field_errors = {}
        if limit < 1:
            field_errors["limit"] = "Limit must be at least 1"
        if offset < 0:
            field_errors["offset"] = "Offset must not be negative"
        if field_errors:
            return Return.err(Error("INVALID_INPUT", "Invalid input", field_errors))

        limit = min(limit, self.max_limit)

        async with self.uow:
            events = await self.uow.audit_events.list_by_account(
                identity.account_id, limit=limit, offset=offset
            )
            total = await self.uow.audit_events.count_by_account(identity.account_id)

            return Return.ok(
                SecurityLogsResponse(
                    data=[SecurityLogEntry.from_entity(event) for event in events],
                    pagination=Pagination(
                        total=total,
                        limit=limit,
                        offset=offset,
                        has_more=offset + len(events) < total,
                    ),
                )
            )
