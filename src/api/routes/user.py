import re
from typing import Annotated, Literal, Optional, Union

from fastapi import APIRouter, Depends, Query, status
from pydantic import AnyHttpUrl, Field, RootModel, TypeAdapter, ValidationError, field_validator

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.app.services.audit_logger import ClientInfo
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import GetSecurityLogsUseCase, SecurityLogsResponse
from src.app.use_cases.users import (
    BasicInfoCommand,
    ChangePasswordCommand,
    ChangePasswordUseCase,
    GetProfileUseCase,
    GetSettingsUseCase,
    ProfessionalInfoCommand,
    ProfileOverviewResponse,
    ProfileUpdateResponse,
    SettingsData,
    SettingsUpdateResponse,
    StatusResponse,
    UpdateProfileUseCase,
    UpdateSettingsUseCase,
)
from src.depends import (
    get_client_info,
    get_current_identity,
    get_password_hasher,
    get_unit_of_work,
)
from src.domain.base import CamelModel
from src.domain.entities import ExperienceLevel
from src.domain.identity import Identity

router = APIRouter(prefix="/user", tags=["User"])

PHONE_PATTERN = re.compile(r"^\+?[\d\s\-\(\)]+$", re.ASCII)
_url_adapter = TypeAdapter(AnyHttpUrl)


def _check_optional_url(value: Optional[str]) -> Optional[str]:
    if not value:
        return value
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid URL")
    return value


class ChangePasswordRequest(CamelModel):
    """
    PUT /user/password payload

    Fields default to empty so that missing values are reported per field
    by the use case's form validation.
    """

    current_password: str = ""
    new_password: str = ""
    confirm_password: str = ""


class BasicInfoRequest(CamelModel):
    type: Literal["basic"]
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    bio: Optional[str] = Field(None, max_length=500)
    location: Optional[str] = Field(None, max_length=100)
    website: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("website")
    @classmethod
    def check_website(cls, value: Optional[str]) -> Optional[str]:
        return _check_optional_url(value)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: Optional[str]) -> Optional[str]:
        if value and not PHONE_PATTERN.match(value):
            raise ValueError("Invalid phone number")
        return value


class ProfessionalInfoRequest(CamelModel):
    type: Literal["professional"]
    occupation: Optional[str] = Field(None, max_length=100)
    company: Optional[str] = Field(None, max_length=100)
    industry: Optional[str] = Field(None, max_length=100)
    experience: Optional[ExperienceLevel] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    twitter_url: Optional[str] = None

    @field_validator("linkedin_url", "github_url", "twitter_url")
    @classmethod
    def check_urls(cls, value: Optional[str]) -> Optional[str]:
        return _check_optional_url(value)


class ProfileUpdateRequest(RootModel):
    """PUT /user/profile payload, discriminated by its "type" field"""

    root: Annotated[
        Union[BasicInfoRequest, ProfessionalInfoRequest], Field(discriminator="type")
    ]


def _raise_for_error(error):
    if error.code == "INVALID_INPUT":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code == "ACCOUNT_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.put("/password", status_code=status.HTTP_200_OK, response_model=StatusResponse)
async def change_password(
    request: ChangePasswordRequest,
    identity: Identity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    client: ClientInfo = Depends(get_client_info),
):
    """
    Change Password

    Verifies the current password, stores a new bcrypt hash and records
    password_changed (or password_change_failed) in the security log.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 400 Bad Request: Invalid input, weak or mismatched new password,
          or incorrect current password
        - 404 Not Found: Account no longer exists
        - 500 Internal Server Error: Server error
    """
    command = ChangePasswordCommand(
        current_password=request.current_password,
        new_password=request.new_password,
        confirm_password=request.confirm_password,
    )

    use_case = ChangePasswordUseCase(uow, hasher)
    result = await use_case.execute(identity, command, client)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CURRENT_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        _raise_for_error(error)

    return result.value


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=ProfileOverviewResponse)
async def get_profile(
    identity: Identity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Profile Overview

    Returns the account record, professional info, security event count and
    profile completion percentage.
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(identity)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.put(
    "/profile",
    status_code=status.HTTP_200_OK,
    response_model=ProfileUpdateResponse,
)
async def update_profile(
    request: ProfileUpdateRequest,
    identity: Identity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    client: ClientInfo = Depends(get_client_info),
):
    """
    Update Profile

    type=basic updates name, bio, location, website and phone and returns
    the updated account; type=professional upserts professional info.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 400 Bad Request: Invalid input or unknown type
        - 404 Not Found: Account no longer exists
        - 500 Internal Server Error: Server error
    """
    payload = request.root
    use_case = UpdateProfileUseCase(uow)

    if isinstance(payload, BasicInfoRequest):
        command = BasicInfoCommand(
            first_name=payload.first_name,
            last_name=payload.last_name,
            bio=payload.bio,
            location=payload.location,
            website=payload.website,
            phone=payload.phone,
        )
        result = await use_case.update_basic_info(identity, command, client)
    else:
        command = ProfessionalInfoCommand(
            occupation=payload.occupation,
            company=payload.company,
            industry=payload.industry,
            experience=payload.experience,
            linkedin_url=payload.linkedin_url,
            github_url=payload.github_url,
            twitter_url=payload.twitter_url,
        )
        result = await use_case.update_professional_info(identity, command, client)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.put("/settings", status_code=status.HTTP_200_OK, response_model=SettingsUpdateResponse)
async def update_settings(
    request: SettingsData,
    identity: Identity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    client: ClientInfo = Depends(get_client_info),
):
    """
    Update Settings

    Replaces theme, language, timezone, notification and privacy settings.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 400 Bad Request: Invalid input
        - 404 Not Found: Account no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = UpdateSettingsUseCase(uow)
    result = await use_case.execute(identity, request, client)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get("/settings", status_code=status.HTTP_200_OK, response_model=SettingsData)
async def get_settings(
    identity: Identity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Settings

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: Account no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = GetSettingsUseCase(uow)
    result = await use_case.execute(identity)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get(
    "/security-logs", status_code=status.HTTP_200_OK, response_model=SecurityLogsResponse
)
async def get_security_logs(
    identity: Identity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(
        ApplicationConfig.SECURITY_LOG_DEFAULT_LIMIT,
        ge=1,
        description="Page size (capped at 50)",
    ),
    offset: int = Query(0, ge=0, description="Number of newest events to skip"),
):
    """
    Security Activity Log

    Returns the signed-in account's audit events, newest first.

    Query Parameters:
        - limit: Page size, default 20, capped at 50 whatever is requested
        - offset: Pagination offset, default 0

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 400 Bad Request: Invalid limit or offset
        - 500 Internal Server Error: Server error
    """
    use_case = GetSecurityLogsUseCase(uow)
    result = await use_case.execute(identity, limit=limit, offset=offset)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value
