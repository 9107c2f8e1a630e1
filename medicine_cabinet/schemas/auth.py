"""Request/response schemas for auth endpoints."""

from pydantic import Field

from medicine_cabinet.schemas.base import CamelModel


class LoginRequest(CamelModel):
    """Credentials for login."""

    user_name: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class TokenResponse(CamelModel):
    """JWT returned by login and refresh; sent back as Authorization: Bearer <authToken>."""

    auth_token: str = Field(..., description="JWT access token")


class CurrentUser(CamelModel):
    """Authenticated user resolved from the bearer token."""

    id: int
    user_name: str
