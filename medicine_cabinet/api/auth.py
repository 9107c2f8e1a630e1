"""JWT login/refresh and the bearer-token guard for protected routes."""

import logging
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from medicine_cabinet.core.database import get_db
from medicine_cabinet.core.errors import AuthenticationError
from medicine_cabinet.core.security import (
    create_access_token,
    decode_access_token,
    verify_password,
)
from medicine_cabinet.models import User
from medicine_cabinet.schemas.auth import CurrentUser, LoginRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with userName and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <authToken>
    """
    user = db.query(User).filter(User.username == body.user_name).first()
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("Login rejected", extra={"user_name": body.user_name})
        raise AuthenticationError("Incorrect userName or password")
    return TokenResponse(auth_token=create_access_token(sub=user.id, user_name=user.username))


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        raise AuthenticationError("Invalid or expired token")
    sub = payload.get("sub")
    if not sub:
        raise AuthenticationError("Invalid token payload")
    try:
        user_id = int(sub)
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid token payload")
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise AuthenticationError("User not found")
    return CurrentUser(id=user.id, user_name=user.username)


@router.post("/refresh", response_model=TokenResponse)
def refresh(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> TokenResponse:
    """Exchange a valid, unexpired token for a new one with a renewed expiry."""
    return TokenResponse(
        auth_token=create_access_token(sub=current_user.id, user_name=current_user.user_name)
    )
