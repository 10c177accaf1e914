"""Core app configuration, database, security and error handling."""

from gatekeeper.core.config import Settings, get_settings
from gatekeeper.core.database import build_engine, build_session_factory, get_db

__all__ = ["Settings", "get_settings", "build_engine", "build_session_factory", "get_db"]
