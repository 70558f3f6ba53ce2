"""
Account Use Cases

Business logic for the signed-in account's password, profile and settings.
"""

from .change_password_use_case import ChangePasswordUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .get_profile_use_case import GetProfileUseCase, calculate_profile_completion
from .update_settings_use_case import UpdateSettingsUseCase
from .get_settings_use_case import GetSettingsUseCase
from .dtos import (
    ChangePasswordCommand,
    BasicInfoCommand,
    ProfessionalInfoCommand,
    SettingsData,
    StatusResponse,
    AccountResponse,
    ProfessionalInfo,
    ProfileUpdateResponse,
    ProfileOverviewResponse,
    SettingsUpdateResponse,
)

__all__ = [
    # Use Cases
    "ChangePasswordUseCase",
    "UpdateProfileUseCase",
    "GetProfileUseCase",
    "UpdateSettingsUseCase",
    "GetSettingsUseCase",
    "calculate_profile_completion",
    # DTOs - Commands
    "ChangePasswordCommand",
    "BasicInfoCommand",
    "ProfessionalInfoCommand",
    "SettingsData",
    # DTOs - Responses
    "StatusResponse",
    "AccountResponse",
    "ProfessionalInfo",
    "ProfileUpdateResponse",
    "ProfileOverviewResponse",
    "SettingsUpdateResponse",
]
