"""Liveness endpoint for load balancers: reports database reachability and catalog size."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from medicine_cabinet.core.config import settings
from medicine_cabinet.core.database import check_db_connected, get_db
from medicine_cabinet.schemas.health import HealthResponse
from medicine_cabinet.services import catalog

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    if not check_db_connected(db):
        logger.warning("Health check could not reach the database")
        return HealthResponse(
            status="degraded", environment=settings.APP_ENV, database="disconnected"
        )
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected",
        strain_count=catalog.count_strains(db),
    )
