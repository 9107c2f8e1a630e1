"""Per-user strain cabinet: ordered strain references and comments on cabinet strains."""

import logging

from sqlalchemy.orm import Session

from medicine_cabinet.core.errors import NotFoundError
from medicine_cabinet.models import CabinetEntry, Comment, Strain, User
from medicine_cabinet.schemas.strain import CommentCreate

logger = logging.getLogger(__name__)


def _get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise NotFoundError("User not found")
    return user


def list_cabinet_strains(db: Session, user_id: int) -> list[Strain]:
    """Strains in the user's cabinet, in the order they were added."""
    return (
        db.query(Strain)
        .join(CabinetEntry, CabinetEntry.strain_id == Strain.id)
        .filter(CabinetEntry.user_id == user_id)
        .order_by(CabinetEntry.id)
        .all()
    )


def get_cabinet_strain(db: Session, user_id: int, strain_id: int) -> Strain:
    """Return the strain if the user's cabinet holds it. Raises NotFoundError otherwise."""
    strain = (
        db.query(Strain)
        .join(CabinetEntry, CabinetEntry.strain_id == Strain.id)
        .filter(CabinetEntry.user_id == user_id, Strain.id == strain_id)
        .first()
    )
    if strain is None:
        raise NotFoundError("Strain is not in your cabinet", location="id")
    return strain


def add_strain(db: Session, user_id: int, strain_id: int) -> User:
    """
    Append a strain reference to the user's cabinet.

    No duplicate check: the client refuses to add a strain it already holds.
    """
    user = _get_user(db, user_id)
    if db.get(Strain, strain_id) is None:
        raise NotFoundError("Strain not found", location="id")
    db.add(CabinetEntry(user_id=user.id, strain_id=strain_id))
    db.commit()
    db.refresh(user)
    logger.info("Strain added to cabinet", extra={"user_id": user.id, "strain_id": strain_id})
    return user


def remove_strain(db: Session, user_id: int, strain_id: int) -> User:
    """Remove every reference to strain_id from the user's cabinet."""
    user = _get_user(db, user_id)
    removed = (
        db.query(CabinetEntry)
        .filter(CabinetEntry.user_id == user.id, CabinetEntry.strain_id == strain_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    db.refresh(user)
    logger.info(
        "Strain removed from cabinet",
        extra={"user_id": user.id, "strain_id": strain_id, "entries_removed": removed},
    )
    return user


def add_comment(
    db: Session,
    user_id: int,
    user_name: str,
    strain_id: int,
    comment: CommentCreate,
) -> Strain:
    """Append a comment to a strain in the user's cabinet; author defaults to the caller."""
    strain = get_cabinet_strain(db, user_id, strain_id)
    author = (comment.author or "").strip() or user_name
    db.add(Comment(strain_id=strain.id, content=comment.content, author=author))
    db.commit()
    db.refresh(strain)
    logger.info("Comment added", extra={"user_id": user_id, "strain_id": strain.id})
    return strain


def remove_comment(db: Session, user_id: int, strain_id: int, comment_id: int) -> Strain:
    """
    Remove a comment from a strain in the user's cabinet.

    Any cabinet holder may remove any comment on the strain; the author match
    is only applied by the client, which hides the control for other authors.
    """
    strain = get_cabinet_strain(db, user_id, strain_id)
    comment = (
        db.query(Comment)
        .filter(Comment.id == comment_id, Comment.strain_id == strain.id)
        .first()
    )
    if comment is None:
        raise NotFoundError("Comment not found", location="comment")
    db.delete(comment)
    db.commit()
    db.refresh(strain)
    logger.info(
        "Comment removed",
        extra={"user_id": user_id, "strain_id": strain.id, "comment_id": comment_id},
    )
    return strain
