"""
Password complexity policy.

A password must be at least 8 characters and contain a lowercase letter,
an uppercase letter and a digit. bcrypt ignores input past 72 bytes, so
longer passwords are rejected outright.
"""

import re
from typing import Dict, Optional

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)", re.ASCII)


def password_policy_violation(password: str) -> Optional[str]:
    """Return a human-readable violation message, or None if the password is acceptable"""
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
    if not PASSWORD_PATTERN.match(password):
        return "Must contain uppercase, lowercase, and number"
    return None


def validate_password_change(
    current_password: str, new_password: str, confirm_password: str
) -> Dict[str, str]:
    """
    Validate a password-change form.

    Returns:
        Field-level error map keyed by wire field name; empty when valid
    """
    errors: Dict[str, str] = {}

    if not current_password:
        errors["currentPassword"] = "Current password is required"

    violation = password_policy_violation(new_password)
    if violation:
        errors["newPassword"] = violation

    if new_password != confirm_password:
        errors["confirmPassword"] = "Passwords don't match"

    return errors
