"""Users endpoints: registration and the authenticated user's strain cabinet."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from medicine_cabinet.api.auth import get_current_user
from medicine_cabinet.core.database import get_db
from medicine_cabinet.schemas.auth import CurrentUser
from medicine_cabinet.schemas.strain import CommentRequest, StrainResponse, StrainsResponse
from medicine_cabinet.schemas.user import UserResponse
from medicine_cabinet.services import cabinet
from medicine_cabinet.services.registration import register_user, validate_registration

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=201)
def create_user(
    payload: Annotated[Any, Body()],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """
    Register a new user.

    Fields are checked in order (missing, type, whitespace, length) and the
    first failure is returned as a 422 located at the field. The response
    never includes the password hash.
    """
    request = validate_registration(payload)
    user = register_user(db, request)
    return UserResponse.from_user(user)


@router.get("/strains", response_model=StrainsResponse)
def list_user_strains(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> StrainsResponse:
    """Strains in the caller's cabinet, in the order they were added."""
    strains = cabinet.list_cabinet_strains(db, current_user.id)
    return StrainsResponse(strains=[StrainResponse.model_validate(s) for s in strains])


@router.get("/strains/{strain_id}", response_model=StrainResponse)
def get_user_strain(
    strain_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> StrainResponse:
    return StrainResponse.model_validate(cabinet.get_cabinet_strain(db, current_user.id, strain_id))


@router.put("/strains/{strain_id}", response_model=UserResponse)
def add_strain_to_cabinet(
    strain_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Append the strain to the caller's cabinet. Duplicates are not rejected here."""
    return UserResponse.from_user(cabinet.add_strain(db, current_user.id, strain_id))


@router.delete("/strains/{strain_id}", response_model=UserResponse)
def remove_strain_from_cabinet(
    strain_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    return UserResponse.from_user(cabinet.remove_strain(db, current_user.id, strain_id))


@router.post("/strains/{strain_id}", response_model=StrainResponse)
def add_comment_to_strain(
    strain_id: int,
    body: CommentRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> StrainResponse:
    """Post a comment on a strain in the caller's cabinet. Returns the updated strain."""
    strain = cabinet.add_comment(db, current_user.id, current_user.user_name, strain_id, body.comment)
    return StrainResponse.model_validate(strain)


@router.delete("/strains/{strain_id}/{comment_id}", response_model=StrainResponse)
def remove_comment_from_strain(
    strain_id: int,
    comment_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> StrainResponse:
    """
    Remove a comment from a strain in the caller's cabinet. Returns the updated strain.

    The comment author is not compared with the caller.
    """
    strain = cabinet.remove_comment(db, current_user.id, strain_id, comment_id)
    return StrainResponse.model_validate(strain)
