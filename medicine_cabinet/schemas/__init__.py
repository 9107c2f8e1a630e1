"""Pydantic request/response schemas."""

from medicine_cabinet.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from medicine_cabinet.schemas.health import HealthResponse
from medicine_cabinet.schemas.strain import (
    CommentCreate,
    CommentRequest,
    CommentResponse,
    StrainCreate,
    StrainResponse,
    StrainsResponse,
)
from medicine_cabinet.schemas.user import RegistrationRequest, UserResponse

__all__ = [
    "CommentCreate",
    "CommentRequest",
    "CommentResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "RegistrationRequest",
    "StrainCreate",
    "StrainResponse",
    "StrainsResponse",
    "TokenResponse",
    "UserResponse",
]
