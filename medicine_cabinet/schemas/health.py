"""Health check response."""

from typing import Literal

from pydantic import Field

from medicine_cabinet.schemas.base import CamelModel


class HealthResponse(CamelModel):
    status: Literal["ok", "degraded"] = "ok"
    environment: str
    database: Literal["connected", "disconnected"]
    strain_count: int | None = Field(
        default=None, description="Catalog size; omitted when the database is unreachable"
    )
