"""Strain catalog: listing, lookup and creation."""

import logging

from sqlalchemy.orm import Session

from medicine_cabinet.core.errors import NotFoundError
from medicine_cabinet.models import Strain
from medicine_cabinet.schemas.strain import StrainCreate

logger = logging.getLogger(__name__)


def list_strains(db: Session) -> list[Strain]:
    return db.query(Strain).order_by(Strain.id).all()


def count_strains(db: Session) -> int:
    return db.query(Strain).count()


def get_strain(db: Session, strain_id: int) -> Strain:
    strain = db.get(Strain, strain_id)
    if strain is None:
        raise NotFoundError("Strain not found", location="id")
    return strain


def create_strain(db: Session, body: StrainCreate) -> Strain:
    """Persist a new catalog strain. body.type is already defaulted to Hybrid when blank."""
    strain = Strain(
        name=body.name,
        type=body.type,
        flavor=body.flavor,
        description=body.description,
    )
    db.add(strain)
    db.commit()
    db.refresh(strain)
    logger.info("Strain created", extra={"strain_id": strain.id})
    return strain
