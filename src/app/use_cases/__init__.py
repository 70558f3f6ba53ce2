"""
Use Cases

Organized into domain folders:
- auth/: Account registration
- users/: Password, profile and settings of the signed-in account
- audit/: Security activity log

Import from subdirectories.
"""
