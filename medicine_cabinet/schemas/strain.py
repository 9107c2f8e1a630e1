"""Pydantic schemas for strains, their comments and comment requests."""

from pydantic import Field, field_validator

from medicine_cabinet.schemas.base import CamelModel

DEFAULT_STRAIN_TYPE = "Hybrid"

NAME_MAX_LENGTH = 255
TYPE_MAX_LENGTH = 32
FLAVOR_MAX_LENGTH = 1024
DESCRIPTION_MAX_LENGTH = 10_000
COMMENT_MAX_LENGTH = 2_000


class CommentResponse(CamelModel):
    id: int
    content: str
    author: str


class StrainResponse(CamelModel):
    """Serialized strain, comments in the order they were posted."""

    id: int
    name: str
    type: str
    flavor: str
    description: str
    comments: list[CommentResponse] = Field(default_factory=list)


class StrainsResponse(CamelModel):
    """Response for GET /strains and GET /users/strains."""

    strains: list[StrainResponse]


class StrainCreate(CamelModel):
    """Request body for POST /strains."""

    name: str = Field(..., max_length=NAME_MAX_LENGTH, description="Strain name")
    type: str | None = Field(
        default=None,
        validate_default=True,
        max_length=TYPE_MAX_LENGTH,
        description="Sativa, Indica or Hybrid; blank or missing means Hybrid.",
    )
    flavor: str = Field(default="", max_length=FLAVOR_MAX_LENGTH)
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Strain name must not be blank")
        return v.strip()

    @field_validator("type")
    @classmethod
    def default_type(cls, v: str | None) -> str:
        if v is None or not v.strip():
            return DEFAULT_STRAIN_TYPE
        return v.strip()

    @field_validator("flavor", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class CommentCreate(CamelModel):
    """A comment as posted by the client. author falls back to the authenticated user."""

    content: str = Field(..., max_length=COMMENT_MAX_LENGTH)
    author: str | None = Field(default=None, max_length=255)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Comment is blank. Please add some content")
        return v


class CommentRequest(CamelModel):
    """Request body for POST /users/strains/{id}: {"comment": {"content", "author"}}."""

    comment: CommentCreate
