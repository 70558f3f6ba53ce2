import pytest

from src.app.use_cases.users import GetSettingsUseCase, SettingsData, UpdateSettingsUseCase
from src.domain.entities import Account, AccountProfile
from tests.utils.audit import recorded_events


@pytest.fixture
def account(identity):
    return Account(
        id=identity.account_id, email="user@example.com", name="User", password_hash="hash"
    )


def _settings(**overrides):
    values = {
        "theme": "system",
        "language": "en",
        "timezone": "UTC",
        "emailNotifications": True,
        "pushNotifications": False,
        "marketingEmails": False,
        "securityAlerts": True,
        "profileVisibility": "private",
        "showEmail": False,
        "showPhone": False,
        "showLocation": False,
    }
    values.update(overrides)
    return SettingsData.model_validate(values)


@pytest.mark.asyncio
async def test_get_settings_defaults_without_profile(mock_uow, identity, account):
    mock_uow.accounts.get_by_id.return_value = account
    mock_uow.profiles.get_by_account_id.return_value = None

    result = await GetSettingsUseCase(mock_uow).execute(identity)

    assert result.is_ok()
    assert result.value == _settings()


@pytest.mark.asyncio
async def test_get_settings_account_not_found(mock_uow, identity):
    mock_uow.accounts.get_by_id.return_value = None

    result = await GetSettingsUseCase(mock_uow).execute(identity)

    assert result.is_err()
    assert result.error.code == "ACCOUNT_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_settings_writes_account_and_profile(
    mock_uow, identity, client_info, account
):
    mock_uow.accounts.get_by_id.return_value = account
    mock_uow.profiles.get_by_account_id.return_value = None
    use_case = UpdateSettingsUseCase(mock_uow)

    result = await use_case.execute(
        identity,
        _settings(theme="dark", timezone="Europe/Paris", showEmail=True),
        client_info,
    )

    assert result.is_ok()
    assert result.value.changes == ["theme", "timezone", "showEmail"]

    assert account.theme == "dark"
    assert account.timezone == "Europe/Paris"
    saved = mock_uow.profiles.save.call_args.args[0]
    assert saved.account_id == identity.account_id
    assert saved.show_email is True

    events = recorded_events(mock_uow)
    assert len(events) == 1
    assert events[0].action == "settings_updated"
    assert events[0].details["changes"] == ["theme", "timezone", "showEmail"]


@pytest.mark.asyncio
async def test_update_settings_with_no_changes(mock_uow, identity, client_info, account):
    profile = AccountProfile(account_id=identity.account_id)
    mock_uow.accounts.get_by_id.return_value = account
    mock_uow.profiles.get_by_account_id.return_value = profile

    result = await UpdateSettingsUseCase(mock_uow).execute(identity, _settings(), client_info)

    assert result.is_ok()
    assert result.value.changes == []
    mock_uow.profiles.save.assert_called_once_with(profile)
