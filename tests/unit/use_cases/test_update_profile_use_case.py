import pytest

from src.app.use_cases.users import (
    BasicInfoCommand,
    ProfessionalInfoCommand,
    UpdateProfileUseCase,
)
from src.domain.entities import Account, AccountProfile, ExperienceLevel
from tests.utils.audit import recorded_events


@pytest.fixture
def account(identity):
    return Account(
        id=identity.account_id,
        email="user@example.com",
        name="User",
        password_hash="hash",
        bio="old bio",
    )


@pytest.mark.asyncio
async def test_update_basic_info(mock_uow, identity, client_info, account):
    mock_uow.accounts.get_by_id.return_value = account
    use_case = UpdateProfileUseCase(mock_uow)

    result = await use_case.update_basic_info(
        identity,
        BasicInfoCommand(
            first_name="Ada",
            last_name="Lovelace",
            bio="",
            location="London",
            website="https://ada.dev",
            phone="+44 20 1234 5678",
        ),
        client_info,
    )

    assert result.is_ok()
    updated = result.value.account
    assert updated.name == "Ada Lovelace"
    assert updated.first_name == "Ada"
    assert updated.bio is None  # empty string clears the field
    assert updated.location == "London"
    assert updated.website == "https://ada.dev"

    events = recorded_events(mock_uow)
    assert len(events) == 1
    assert events[0].action == "PROFILE_UPDATED"
    assert events[0].details == {"section": "basic"}


@pytest.mark.asyncio
async def test_update_professional_info_creates_profile(mock_uow, identity, client_info, account):
    mock_uow.accounts.get_by_id.return_value = account
    mock_uow.profiles.get_by_account_id.return_value = None
    use_case = UpdateProfileUseCase(mock_uow)

    result = await use_case.update_professional_info(
        identity,
        ProfessionalInfoCommand(
            occupation="Engineer",
            company="Analytical Engines",
            experience=ExperienceLevel.senior,
            github_url="",
        ),
        client_info,
    )

    assert result.is_ok()
    assert result.value.account is None

    saved = mock_uow.profiles.save.call_args.args[0]
    assert saved.account_id == identity.account_id
    assert saved.occupation == "Engineer"
    assert saved.experience == "Senior"
    assert saved.github_url is None

    events = recorded_events(mock_uow)
    assert events[0].details == {"section": "professional"}


@pytest.mark.asyncio
async def test_update_professional_info_updates_existing_profile(
    mock_uow, identity, client_info, account
):
    existing = AccountProfile(account_id=identity.account_id, occupation="Student")
    mock_uow.accounts.get_by_id.return_value = account
    mock_uow.profiles.get_by_account_id.return_value = existing
    use_case = UpdateProfileUseCase(mock_uow)

    result = await use_case.update_professional_info(
        identity, ProfessionalInfoCommand(occupation="Engineer"), client_info
    )

    assert result.is_ok()
    mock_uow.profiles.save.assert_called_once_with(existing)
    assert existing.occupation == "Engineer"


@pytest.mark.asyncio
async def test_update_profile_account_not_found(mock_uow, identity, client_info):
    mock_uow.accounts.get_by_id.return_value = None
    use_case = UpdateProfileUseCase(mock_uow)

    result = await use_case.update_basic_info(
        identity, BasicInfoCommand(first_name="A", last_name="B"), client_info
    )

    assert result.is_err()
    assert result.error.code == "ACCOUNT_NOT_FOUND"
    mock_uow.audit_events.create.assert_not_called()
