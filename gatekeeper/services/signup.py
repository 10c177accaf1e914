"""Sign-up flow: duplicate check, hash, insert, sign token."""

import logging
from dataclasses import dataclass

from gatekeeper.core.exceptions import DuplicateUserError
from gatekeeper.core.security import TokenIssuer, hash_password
from gatekeeper.schemas.auth import AuthClaims, PublicUser, SignupRequest
from gatekeeper.services.user_store import UserStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignupResult:
    user: PublicUser
    token: str


class SignupService:
    """Registers a validated sign-up request and issues its auth token."""

    def __init__(self, store: UserStore, tokens: TokenIssuer) -> None:
        self.store = store
        self.tokens = tokens

    def register(self, signup: SignupRequest) -> SignupResult:
        """
        Create the user and sign its token.

        The existence check runs before the slow hash; the store's unique
        constraint still has the final word and raises DuplicateUserError on a
        concurrent insert of the same email.
        """
        if self.store.find_by_email(signup.email) is not None:
            raise DuplicateUserError(signup.email)

        password_hash = hash_password(signup.password)
        user = self.store.insert(
            name=signup.name,
            email=signup.email,
            password_hash=password_hash,
            role=signup.role,
        )
        token = self.tokens.sign(AuthClaims(id=user.id, email=user.email, role=user.role))
        logger.info("User registered successfully: %s (id=%s)", user.email, user.id)
        return SignupResult(user=user, token=token)
