"""SQLAlchemy ORM models."""

from medicine_cabinet.models.base import Base
from medicine_cabinet.models.strain import Comment, Strain
from medicine_cabinet.models.user import CabinetEntry, User

__all__ = ["Base", "CabinetEntry", "Comment", "Strain", "User"]
