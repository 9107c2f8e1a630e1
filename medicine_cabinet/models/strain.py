"""ORM models for the strain catalog and strain comments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from medicine_cabinet.models.base import Base


class Strain(Base):
    """Catalog entry. type is stored as entered; display buckets are derived when rendering."""

    __tablename__ = "strains"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    type = Column(String(32), nullable=False, default="Hybrid")
    flavor = Column(String(1024), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    comments = relationship(
        "Comment",
        back_populates="strain",
        order_by="Comment.id",
        cascade="all, delete-orphan",
    )


class Comment(Base):
    """Community comment on a strain; author is the poster's userName."""

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    strain_id = Column(
        Integer, ForeignKey("strains.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content = Column(Text, nullable=False)
    author = Column(String(255), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    strain = relationship("Strain", back_populates="comments")
