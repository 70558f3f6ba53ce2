import pytest
from sqlalchemy.exc import IntegrityError

from src.app.use_cases.auth import RegisterAccountUseCase, RegisterCommand
from src.domain.entities import Account
from tests.utils.audit import recorded_events


@pytest.mark.asyncio
async def test_successful_registration(mock_uow, hasher, client_info):
    """Email is lower-cased and the password stored only as a bcrypt hash"""
    mock_uow.accounts.get_by_email.return_value = None
    use_case = RegisterAccountUseCase(mock_uow, hasher)

    result = await use_case.execute(
        RegisterCommand(name="Ann", email="A@x.com", password="Abcdefg1"), client_info
    )

    assert result.is_ok()
    summary = result.value
    assert summary.email == "a@x.com"
    assert summary.name == "Ann"

    mock_uow.accounts.get_by_email.assert_called_once_with("a@x.com")
    created = mock_uow.accounts.create.call_args.args[0]
    assert created.password_hash != "Abcdefg1"
    assert hasher.verify("Abcdefg1", created.password_hash)

    events = recorded_events(mock_uow)
    assert [e.action for e in events] == ["account_registered"]
    assert events[0].details == {"email": "a@x.com"}


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(mock_uow, hasher, client_info):
    mock_uow.accounts.get_by_email.return_value = Account(
        email="a@x.com", name="Ann", password_hash="x"
    )
    use_case = RegisterAccountUseCase(mock_uow, hasher)

    result = await use_case.execute(
        RegisterCommand(name="Ann", email="A@X.COM", password="Abcdefg1"), client_info
    )

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.accounts.create.assert_not_called()
    mock_uow.audit_events.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_duplicate_insert_is_rejected(mock_uow, hasher, client_info):
    """Unique constraint violation on insert reports the email as taken"""
    mock_uow.accounts.get_by_email.return_value = None
    mock_uow.accounts.create.side_effect = IntegrityError(
        "INSERT INTO accounts", {}, Exception("UNIQUE constraint failed: accounts.email")
    )
    use_case = RegisterAccountUseCase(mock_uow, hasher)

    result = await use_case.execute(
        RegisterCommand(name="Ann", email="a@x.com", password="Abcdefg1"), client_info
    )

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.rollback.assert_awaited_once()
    mock_uow.commit.assert_not_called()
    mock_uow.audit_events.create.assert_not_called()
