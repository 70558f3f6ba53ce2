from uuid import uuid4

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.audit_logger import ClientInfo
from src.app.services.password_hasher import PasswordHasher
from src.domain.identity import Identity


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_id = AsyncMock()
    uow.accounts.get_by_email = AsyncMock()
    uow.accounts.create = AsyncMock(side_effect=lambda account: account)
    uow.accounts.update = AsyncMock(side_effect=lambda account: account)

    uow.profiles = MagicMock()
    uow.profiles.get_by_account_id = AsyncMock(return_value=None)
    uow.profiles.save = AsyncMock(side_effect=lambda profile: profile)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock(side_effect=lambda event: event)
    uow.audit_events.list_by_account = AsyncMock(return_value=[])
    uow.audit_events.count_by_account = AsyncMock(return_value=0)
    return uow


@pytest.fixture
def hasher():
    """Low-cost bcrypt hasher to keep tests fast"""
    return PasswordHasher(rounds=4)


@pytest.fixture
def identity():
    return Identity(account_id=uuid4())


@pytest.fixture
def client_info():
    return ClientInfo(ip_address="203.0.113.7", user_agent="pytest-agent")

