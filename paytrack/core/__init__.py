"""Core app configuration, database, security and errors."""

from paytrack.core.config import Settings, get_settings
from paytrack.core.database import get_db

__all__ = ["Settings", "get_settings", "get_db"]
