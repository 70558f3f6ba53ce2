"""
Account Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    Theme,
    ProfileVisibility,
    ExperienceLevel,
    AuditAction,
)

# Export all entities
from .account import Account
from .account_profile import AccountProfile
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "Theme",
    "ProfileVisibility",
    "ExperienceLevel",
    "AuditAction",
    # Entities
    "Account",
    "AccountProfile",
    "AuditEvent",
]
