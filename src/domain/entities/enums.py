"""
Account Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class Theme(str, Enum):
    """UI colour theme preference"""

    light = "light"
    dark = "dark"
    system = "system"


class ProfileVisibility(str, Enum):
    """Who can see the account's public profile"""

    private = "private"
    public = "public"
    friends = "friends"


class ExperienceLevel(str, Enum):
    """Professional seniority"""

    entry = "Entry"
    junior = "Junior"
    mid = "Mid"
    senior = "Senior"
    lead = "Lead"
    executive = "Executive"


class AuditAction(str, Enum):
    """Security-relevant actions recorded in the audit trail"""

    account_registered = "account_registered"
    password_changed = "password_changed"
    password_change_failed = "password_change_failed"
    profile_updated = "PROFILE_UPDATED"
    settings_updated = "settings_updated"
