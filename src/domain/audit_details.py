"""
Audit Detail Schemas

Closed set of per-action detail payloads stored in AuditEvent.details.
Each AuditAction accepts exactly one detail schema.
"""

from datetime import datetime
from typing import Dict, List, Literal, Type, Union

from pydantic import BaseModel, Field

from src.domain.base import utc_now
from src.domain.entities.enums import AuditAction


class AccountRegisteredDetail(BaseModel):
    email: str


class PasswordChangedDetail(BaseModel):
    timestamp: datetime = Field(default_factory=utc_now)


class PasswordChangeFailedDetail(BaseModel):
    reason: Literal["invalid_current_password"] = "invalid_current_password"


class ProfileUpdatedDetail(BaseModel):
    section: Literal["basic", "professional"]


class SettingsUpdatedDetail(BaseModel):
    changes: List[str]
    timestamp: datetime = Field(default_factory=utc_now)


AuditDetail = Union[
    AccountRegisteredDetail,
    PasswordChangedDetail,
    PasswordChangeFailedDetail,
    ProfileUpdatedDetail,
    SettingsUpdatedDetail,
]

DETAIL_SCHEMAS: Dict[AuditAction, Type[BaseModel]] = {
    AuditAction.account_registered: AccountRegisteredDetail,
    AuditAction.password_changed: PasswordChangedDetail,
    AuditAction.password_change_failed: PasswordChangeFailedDetail,
    AuditAction.profile_updated: ProfileUpdatedDetail,
    AuditAction.settings_updated: SettingsUpdatedDetail,
}
