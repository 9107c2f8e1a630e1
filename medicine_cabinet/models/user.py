"""ORM models for application users and their strain cabinets."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from medicine_cabinet.models.base import Base


class User(Base):
    """User account for JWT authentication; owns an ordered cabinet of strains."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=False, default="")
    last_name = Column(String(255), nullable=False, default="")

    cabinet_entries = relationship(
        "CabinetEntry",
        back_populates="user",
        order_by="CabinetEntry.id",
        cascade="all, delete-orphan",
    )

    @property
    def strain_ids(self) -> list[int]:
        """Strain references in the order they were added (duplicates kept)."""
        return [entry.strain_id for entry in self.cabinet_entries]


class CabinetEntry(Base):
    """
    One strain reference in a user's cabinet.

    Rows are ordered by id; the same strain may appear more than once since
    duplicates are only prevented by the client.
    """

    __tablename__ = "cabinet_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    strain_id = Column(
        Integer, ForeignKey("strains.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    user = relationship("User", back_populates="cabinet_entries")
    strain = relationship("Strain")
