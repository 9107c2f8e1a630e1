"""Pydantic schemas for registration and serialized users."""

from pydantic import Field

from medicine_cabinet.models import User
from medicine_cabinet.schemas.base import CamelModel


class RegistrationRequest(CamelModel):
    """Registration fields after validation; firstName/lastName already trimmed."""

    user_name: str
    password: str
    first_name: str = ""
    last_name: str = ""


class UserResponse(CamelModel):
    """Serialized user. Never carries the password hash."""

    id: int
    user_name: str
    first_name: str
    last_name: str
    strains: list[int] = Field(
        default_factory=list,
        description="Strain ids in the user's cabinet, in insertion order.",
    )

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            user_name=user.username,
            first_name=user.first_name or "",
            last_name=user.last_name or "",
            strains=user.strain_ids,
        )
