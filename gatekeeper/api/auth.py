"""Auth endpoints: sign-up, plus sign-in/sign-out placeholders."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, status
from fastapi.responses import JSONResponse

from gatekeeper.api.deps import get_cookie_manager, get_signup_service
from gatekeeper.core.cookies import TOKEN_COOKIE_NAME, CookieManager
from gatekeeper.core.exceptions import (
    EMAIL_EXISTS,
    VALIDATION_FAILED,
    DuplicateUserError,
    ValidationFailure,
    error_response,
)
from gatekeeper.schemas.auth import MessageResponse, SignupResponse
from gatekeeper.services.signup import SignupService
from gatekeeper.services.validation import validate_signup

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/sign-up",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Validation Failed"},
        409: {"description": "Email already exists"},
        500: {"description": "Internal server error"},
    },
)
def sign_up(
    response: Response,
    service: Annotated[SignupService, Depends(get_signup_service)],
    cookies: Annotated[CookieManager, Depends(get_cookie_manager)],
    payload: Annotated[Any, Body()] = None,
) -> SignupResponse | JSONResponse:
    """
    Register a new user and set the signed auth token as an HttpOnly cookie.

    400 on invalid input, 409 when the email is taken; any other failure
    propagates to the global handler, which logs it and answers a generic 500.
    """
    try:
        signup = validate_signup(payload)
    except ValidationFailure as e:
        return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_FAILED, e.details)

    try:
        result = service.register(signup)
    except DuplicateUserError:
        logger.info("Sign-up rejected, email already registered: %s", signup.email)
        return error_response(status.HTTP_409_CONFLICT, EMAIL_EXISTS)

    cookies.set(response, TOKEN_COOKIE_NAME, result.token)
    return SignupResponse(message="User registered", user=result.user)


@router.post("/sign-in", response_model=MessageResponse)
def sign_in() -> MessageResponse:
    """Placeholder; credential check is not implemented yet."""
    return MessageResponse(message="POST /api/auth/sign-in response")


@router.post("/sign-out", response_model=MessageResponse)
def sign_out() -> MessageResponse:
    """Placeholder; session teardown is not implemented yet."""
    return MessageResponse(message="POST /api/auth/sign-out response")
