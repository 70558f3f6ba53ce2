from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Identity:
    """Authenticated account resolved from the request's session token"""

    account_id: UUID
