"""Strain catalog endpoints: public listing and lookup, authenticated creation."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from medicine_cabinet.api.auth import get_current_user
from medicine_cabinet.core.database import get_db
from medicine_cabinet.schemas.auth import CurrentUser
from medicine_cabinet.schemas.strain import StrainCreate, StrainResponse, StrainsResponse
from medicine_cabinet.services import catalog

router = APIRouter()


@router.get("", response_model=StrainsResponse)
def list_strains(db: Annotated[Session, Depends(get_db)]) -> StrainsResponse:
    """Every strain in the catalog, oldest first."""
    return StrainsResponse(
        strains=[StrainResponse.model_validate(s) for s in catalog.list_strains(db)]
    )


@router.post("", response_model=StrainResponse, status_code=201)
def create_strain(
    body: StrainCreate,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> StrainResponse:
    """
    Add a strain to the catalog.

    A blank or missing type is stored as Hybrid. name must not be blank.
    """
    return StrainResponse.model_validate(catalog.create_strain(db, body))


@router.get("/{strain_id}", response_model=StrainResponse)
def get_strain(strain_id: int, db: Annotated[Session, Depends(get_db)]) -> StrainResponse:
    return StrainResponse.model_validate(catalog.get_strain(db, strain_id))
