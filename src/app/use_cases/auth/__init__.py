"""
Authentication Use Cases

Account registration business logic.
"""

from .register_account_use_case import RegisterAccountUseCase
from .dtos import RegisterCommand, AccountSummary

__all__ = [
    # Use Cases
    "RegisterAccountUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AccountSummary",
]
