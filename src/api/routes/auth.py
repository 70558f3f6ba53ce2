from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator

from src.api.error import ClientError, ServerError
from src.app.services.audit_logger import ClientInfo
from src.app.services.password_hasher import PasswordHasher
from src.app.services.password_policy import password_policy_violation
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AccountSummary, RegisterAccountUseCase, RegisterCommand
from src.depends import get_client_info, get_password_hasher, get_unit_of_work

router = APIRouter(tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    API layer responsibility: HTTP validation and serialization.
    """

    name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=2, max_length=50)
    ] = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., description="Password (min 8 chars, upper, lower, digit)")

    @field_validator("password")
    @classmethod
    def check_password_policy(cls, value: str) -> str:
        violation = password_policy_violation(value)
        if violation:
            raise ValueError(violation)
        return value


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AccountSummary
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    client: ClientInfo = Depends(get_client_info),
):
    """
    Account Registration

    Command/Response Flow:
    1. RegisterRequest validates HTTP input
    2. Map to RegisterCommand (business intent)
    3. Execute RegisterAccountUseCase
    4. Return AccountSummary

    Raises:
        - 400 Bad Request: Invalid input
        - 409 Conflict: Email already registered (case-insensitive)
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = RegisterAccountUseCase(uow, hasher)
    result = await use_case.execute(command, client)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
