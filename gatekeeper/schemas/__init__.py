"""Pydantic request/response schemas."""

from gatekeeper.schemas.auth import (
    AuthClaims,
    MessageResponse,
    PublicUser,
    SignupRequest,
    SignupResponse,
)
from gatekeeper.schemas.health import HealthResponse

__all__ = [
    "AuthClaims",
    "HealthResponse",
    "MessageResponse",
    "PublicUser",
    "SignupRequest",
    "SignupResponse",
]
