"""HTTP routes."""

from fastapi import APIRouter, Depends

from gatekeeper.api import auth, health
from gatekeeper.api.deps import enforce_rate_limit

router = APIRouter(dependencies=[Depends(enforce_rate_limit)])
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/api/auth", tags=["auth"])
