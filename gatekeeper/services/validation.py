"""Sign-up payload validation: raw JSON body -> normalized SignupRequest."""

from typing import Any

from pydantic import ValidationError

from gatekeeper.core.exceptions import ValidationFailure
from gatekeeper.schemas.auth import SignupRequest


def _format_issue(error: dict[str, Any]) -> str:
    """Prefix a pydantic error message with the dotted field path."""
    field = ".".join(str(part) for part in error.get("loc", ()))
    message = str(error.get("msg", "Invalid value"))
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{field}: {message}" if field else message


def validate_signup(payload: Any) -> SignupRequest:
    """
    Validate and normalize a sign-up payload.

    Returns a SignupRequest with name trimmed, email trimmed and lowercased,
    and role defaulted to 'user'. Raises ValidationFailure with one message
    per failing field, in field order. No side effects.
    """
    if not isinstance(payload, dict):
        raise ValidationFailure(["Request body must be a JSON object"])
    try:
        return SignupRequest.model_validate(payload)
    except ValidationError as e:
        raise ValidationFailure([_format_issue(err) for err in e.errors()]) from e
