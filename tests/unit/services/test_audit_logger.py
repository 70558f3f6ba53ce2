from uuid import uuid4

import pytest

from src.app.services.audit_logger import AuditLogger, ClientInfo
from src.domain.audit_details import (
    PasswordChangedDetail,
    ProfileUpdatedDetail,
    SettingsUpdatedDetail,
)
from src.domain.entities import AuditAction
from tests.utils.audit import recorded_events


@pytest.mark.asyncio
async def test_record_appends_and_commits(mock_uow):
    account_id = uuid4()

    written = await AuditLogger(mock_uow).record(
        account_id=account_id,
        action=AuditAction.settings_updated,
        detail=SettingsUpdatedDetail(changes=["theme"]),
        success=True,
        client=ClientInfo(ip_address="10.0.0.1", user_agent="agent"),
    )

    assert written is True
    mock_uow.commit.assert_awaited_once()

    event = recorded_events(mock_uow)[0]
    assert event.account_id == account_id
    assert event.action == "settings_updated"
    assert event.details["changes"] == ["theme"]
    assert isinstance(event.details["timestamp"], str)
    assert event.ip_address == "10.0.0.1"


@pytest.mark.asyncio
async def test_record_defaults_to_unknown_client(mock_uow):
    await AuditLogger(mock_uow).record(
        uuid4(), AuditAction.password_changed, PasswordChangedDetail(), True, ClientInfo()
    )

    event = recorded_events(mock_uow)[0]
    assert event.ip_address == "unknown"
    assert event.user_agent == "unknown"


@pytest.mark.asyncio
async def test_record_failure_is_swallowed(mock_uow, caplog):
    mock_uow.commit.side_effect = RuntimeError("database is locked")

    written = await AuditLogger(mock_uow).record(
        uuid4(), AuditAction.password_changed, PasswordChangedDetail(), True, ClientInfo()
    )

    assert written is False
    mock_uow.rollback.assert_awaited_once()
    assert "Failed to record audit event password_changed" in caplog.text


@pytest.mark.asyncio
async def test_record_failure_with_failing_rollback(mock_uow):
    mock_uow.audit_events.create.side_effect = RuntimeError("boom")
    mock_uow.rollback.side_effect = RuntimeError("connection closed")

    written = await AuditLogger(mock_uow).record(
        uuid4(), AuditAction.password_changed, PasswordChangedDetail(), True, ClientInfo()
    )

    assert written is False


@pytest.mark.asyncio
async def test_detail_must_match_action(mock_uow):
    with pytest.raises(ValueError):
        await AuditLogger(mock_uow).record(
            uuid4(),
            AuditAction.password_changed,
            ProfileUpdatedDetail(section="basic"),
            True,
            ClientInfo(),
        )

    mock_uow.audit_events.create.assert_not_called()
