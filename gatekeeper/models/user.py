"""ORM model for registered users."""

from sqlalchemy import Column, DateTime, Integer, String, func

from gatekeeper.models.base import Base


class User(Base):
    """
    User account created by sign-up.

    email is stored trimmed and lowercased; the unique index on it is the
    authoritative duplicate guard. role: 'admin' or 'user'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column("password", String(255), nullable=False)
    role = Column(String(50), nullable=False, default="user", server_default="user")
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
