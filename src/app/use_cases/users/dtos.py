"""
Account Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the signed-in account's own data:
password, profile and settings.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from src.domain.base import CamelModel
from src.domain.entities import (
    Account,
    AccountProfile,
    ExperienceLevel,
    ProfileVisibility,
    Theme,
)


# ============================================================================
# Command DTOs
# ============================================================================


class ChangePasswordCommand(BaseModel):
    """Password change form as submitted; validated by the use case"""

    current_password: str = ""
    new_password: str = ""
    confirm_password: str = ""


class BasicInfoCommand(BaseModel):
    """Basic profile fields; empty strings mean 'clear'"""

    first_name: str
    last_name: str
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None


class ProfessionalInfoCommand(BaseModel):
    """Professional profile fields; empty strings mean 'clear'"""

    occupation: Optional[str] = None
    company: Optional[str] = None
    industry: Optional[str] = None
    experience: Optional[ExperienceLevel] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    twitter_url: Optional[str] = None


class SettingsData(CamelModel):
    """
    Full preference set of an account.

    Used both as the PUT /user/settings command and the GET snapshot, so a
    round trip returns exactly what was submitted.
    """

    theme: Theme
    language: str = Field(..., min_length=2, max_length=20)
    timezone: str = Field(..., min_length=1, max_length=64)
    email_notifications: bool
    push_notifications: bool
    marketing_emails: bool
    security_alerts: bool
    profile_visibility: ProfileVisibility
    show_email: bool
    show_phone: bool
    show_location: bool

    @classmethod
    def from_entities(cls, account: Account, profile: AccountProfile) -> "SettingsData":
        return cls(
            theme=account.theme,
            language=account.language,
            timezone=account.timezone,
            email_notifications=profile.email_notifications,
            push_notifications=profile.push_notifications,
            marketing_emails=profile.marketing_emails,
            security_alerts=profile.security_alerts,
            profile_visibility=profile.profile_visibility,
            show_email=profile.show_email,
            show_phone=profile.show_phone,
            show_location=profile.show_location,
        )

    def changed_fields(self, other: "SettingsData") -> List[str]:
        """camelCase names of the fields whose value differs from other"""
        return [
            to_camel(name)
            for name in type(self).model_fields
            if getattr(self, name) != getattr(other, name)
        ]


# ============================================================================
# Response DTOs
# ============================================================================


class StatusResponse(CamelModel):
    """Generic success acknowledgement"""

    status: str
    message: str


class AccountResponse(CamelModel):
    """Account record as returned to its owner (never includes the password hash)"""

    id: UUID
    email: str
    name: str
    first_name: Optional[str]
    last_name: Optional[str]
    bio: Optional[str]
    location: Optional[str]
    phone: Optional[str]
    website: Optional[str]
    avatar: Optional[str]
    theme: str
    language: str
    timezone: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            email=account.email,
            name=account.name,
            first_name=account.first_name,
            last_name=account.last_name,
            bio=account.bio,
            location=account.location,
            phone=account.phone,
            website=account.website,
            avatar=account.avatar,
            theme=account.theme,
            language=account.language,
            timezone=account.timezone,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class ProfessionalInfo(CamelModel):
    occupation: Optional[str]
    company: Optional[str]
    industry: Optional[str]
    experience: Optional[str]
    linkedin_url: Optional[str]
    github_url: Optional[str]
    twitter_url: Optional[str]

    @classmethod
    def from_entity(cls, profile: AccountProfile) -> "ProfessionalInfo":
        return cls(
            occupation=profile.occupation,
            company=profile.company,
            industry=profile.industry,
            experience=profile.experience,
            linkedin_url=profile.linkedin_url,
            github_url=profile.github_url,
            twitter_url=profile.twitter_url,
        )


class ProfileUpdateResponse(CamelModel):
    """PUT /user/profile response; account is only set for basic updates"""

    status: str
    message: str
    account: Optional[AccountResponse] = None


class ProfileOverviewResponse(CamelModel):
    """GET /user/profile response payload"""

    account: AccountResponse
    professional: Optional[ProfessionalInfo]
    security_event_count: int
    profile_completion: int


class SettingsUpdateResponse(CamelModel):
    """PUT /user/settings response payload"""

    status: str
    message: str
    changes: List[str]
