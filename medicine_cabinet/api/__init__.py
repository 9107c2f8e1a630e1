"""API routes."""

from fastapi import APIRouter

from medicine_cabinet.api import auth, health, strains, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(strains.router, prefix="/strains", tags=["strains"])
