"""Password hashing and JWT signing/verification for authentication."""

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt
from pydantic import ValidationError

from gatekeeper.core.exceptions import HashingError, TokenError
from gatekeeper.schemas.auth import AuthClaims

if TYPE_CHECKING:
    from gatekeeper.core.config import Settings

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds); fixed work factor for stored password hashes.
BCRYPT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        hashed = bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    except (ValueError, TypeError, MemoryError) as e:
        raise HashingError("Failed to hash password") from e
    return hashed.decode("utf-8")


class TokenIssuer:
    """Signs AuthClaims into HS256 JWTs and verifies them back."""

    def __init__(self, settings: "Settings") -> None:
        self._secret = settings.JWT_SECRET.get_secret_value()
        self._algorithm = settings.JWT_ALGORITHM
        self._expires = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)

    def sign(self, claims: AuthClaims, expires_delta: timedelta | None = None) -> str:
        """Create a JWT carrying id, email, role plus iat and exp."""
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            **claims.model_dump(),
            "iat": now,
            "exp": now + (expires_delta if expires_delta is not None else self._expires),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, TypeError, ValueError, NotImplementedError):
            logger.exception("Failed to sign authentication token for user id=%s", claims.id)
            raise TokenError("Failed to authenticate") from None

    def verify(self, token: str) -> AuthClaims:
        """
        Decode and validate a JWT; return its AuthClaims.
        Raises TokenError on expired, tampered, or malformed tokens.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Token verification failed: token expired")
            raise TokenError("Invalid token") from None
        except jwt.PyJWTError as e:
            logger.info("Token verification failed: %s", e)
            raise TokenError("Invalid token") from None
        try:
            return AuthClaims.model_validate(payload)
        except ValidationError:
            logger.info("Token verification failed: claims missing or malformed")
            raise TokenError("Invalid token") from None
