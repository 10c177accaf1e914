"""SQLAlchemy ORM models."""

from gatekeeper.models.base import Base
from gatekeeper.models.user import User

__all__ = ["Base", "User"]
