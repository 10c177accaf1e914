"""User persistence: lookup by email and insert returning the public projection."""

import logging

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from gatekeeper.core.exceptions import DuplicateUserError, StoreUnavailableError
from gatekeeper.models import User
from gatekeeper.schemas.auth import PublicUser

logger = logging.getLogger(__name__)

# Columns returned to callers after insert; the password hash is never selected.
PUBLIC_COLUMNS = (User.id, User.name, User.email, User.role, User.created_at)


class UserStore:
    """Narrow persistence boundary over the users table for one request's session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        try:
            return self.db.query(User).filter(User.email == email).first()
        except OperationalError as e:
            raise StoreUnavailableError("User store unavailable") from e

    def insert(self, name: str, email: str, password_hash: str, role: str) -> PublicUser:
        """
        Insert a user and return its public projection.

        Raises DuplicateUserError when the unique email constraint rejects the
        row, even if an earlier find_by_email found nothing.
        """
        stmt = (
            insert(User)
            .values(
                {
                    User.name: name,
                    User.email: email,
                    User.password_hash: password_hash,
                    User.role: role,
                }
            )
            .returning(*PUBLIC_COLUMNS)
        )
        try:
            row = self.db.execute(stmt).one()
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.find_by_email(email) is not None:
                logger.info("Insert rejected by unique email constraint: %s", email)
                raise DuplicateUserError(email) from None
            raise
        except OperationalError as e:
            self.db.rollback()
            raise StoreUnavailableError("User store unavailable") from e
        return PublicUser.model_validate(dict(row._mapping))
