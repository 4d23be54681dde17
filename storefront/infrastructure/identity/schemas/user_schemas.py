"""Pydantic schemas for user and auth API request/response validation."""

from uuid import UUID

from pydantic import BaseModel, Field

# Lengths and formats are checked by UserService so that both transports
# report them the same way; these schemas only bind types.


class UserRegisterRequest(BaseModel):
    """Schema for self-service registration."""

    name: str = Field(..., description="Display name, at least 5 characters")
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password, at least 8 characters")


class UserCreateRequest(UserRegisterRequest):
    """Schema for an administrator creating an account."""

    phone_number: str = Field("", max_length=50)
    address: str = ""


class UserUpdateRequest(BaseModel):
    """Schema for a partial user update. Omitted or null fields are left unchanged."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    phone_number: str | None = Field(None, max_length=50)
    address: str | None = None


class LoginRequest(BaseModel):
    email: str
    password: str


class RefreshTokenRequest(BaseModel):
    refresh_token: str


class User(BaseModel):
    """Schema for User response."""

    id: UUID
    name: str
    email: str
    phone_number: str
    address: str
    role: str

    model_config = {"from_attributes": True}
