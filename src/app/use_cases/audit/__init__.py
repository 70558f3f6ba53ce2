"""
Audit Use Cases

Security activity log retrieval.
"""

from .get_security_logs_use_case import GetSecurityLogsUseCase
from .dtos import Pagination, SecurityLogEntry, SecurityLogsResponse

__all__ = [
    "GetSecurityLogsUseCase",
    "Pagination",
    "SecurityLogEntry",
    "SecurityLogsResponse",
]
