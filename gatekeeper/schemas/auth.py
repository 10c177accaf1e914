"""Request/response schemas for auth endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

Role = Literal["user", "admin"]

NAME_MIN_LEN = 2
NAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128


class SignupRequest(BaseModel):
    """Normalized sign-up payload: trimmed name, trimmed lowercase email."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: Role = "user"

    @field_validator("name", mode="before")
    @classmethod
    def _trim_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def _normalise_email(cls, v: object) -> object:
        if not isinstance(v, str):
            return v
        v = v.strip().lower()
        if len(v) > EMAIL_MAX_LEN:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LEN} characters")
        return v


class PublicUser(BaseModel):
    """User fields safe to return to a client (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str
    created_at: datetime = Field(serialization_alias="createdAt")


class AuthClaims(BaseModel):
    """Claims embedded in the signed auth token."""

    id: int
    email: str
    role: str


class SignupResponse(BaseModel):
    """Response body for a successful sign-up."""

    message: str = "User registered"
    user: PublicUser


class MessageResponse(BaseModel):
    """Plain message body used by placeholder endpoints."""

    message: str
