"""Core app configuration, database and error types."""

from medicine_cabinet.core.config import get_settings, settings
from medicine_cabinet.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
