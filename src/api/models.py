"""
API request and response models.

Pydantic models for request body validation and OpenAPI schema generation.
Wire names are camelCase; attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator


class SignUpRequest(BaseModel):
    """Request model for account sign-up."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Account holder name")
    email: EmailStr
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")
    password_confirmation: str = Field(..., alias="passwordConfirmation")

    @field_validator("password_confirmation")
    @classmethod
    def passwords_match(cls, value: str, info: ValidationInfo) -> str:
        if "password" in info.data and value != info.data["password"]:
            raise ValueError("Password confirmation does not match")
        return value


class LoginRequest(BaseModel):
    """Request model for credential login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class AccessTokenResponse(BaseModel):
    """Response model for successful sign-up or login."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")


class AccountIdResponse(BaseModel):
    """Response model for authenticated account lookups."""

    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(..., alias="accountId")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
