"""FastAPI dependencies built from the components stored on app.state."""

import logging
import math
import time
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.orm import Session

from gatekeeper.core.cookies import CookieManager
from gatekeeper.core.database import get_db
from gatekeeper.services.signup import SignupService
from gatekeeper.services.user_store import UserStore

logger = logging.getLogger(__name__)


def enforce_rate_limit(request: Request) -> None:
    """Spend one unit of the caller's budget; 429 with Retry-After once it is used up."""
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return
    item = request.app.state.rate_limit
    key = get_remote_address(request)
    if limiter.limiter.hit(item, key):
        return
    reset_at, _remaining = limiter.limiter.get_window_stats(item, key)
    retry_after = max(1, math.ceil(reset_at - time.time()))
    logger.warning("Rate limit exceeded for %s on %s", key, request.url.path)
    raise HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail="Too many requests",
        headers={"Retry-After": str(retry_after)},
    )


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    return UserStore(db)


def get_signup_service(
    request: Request,
    store: Annotated[UserStore, Depends(get_user_store)],
) -> SignupService:
    return SignupService(store, request.app.state.token_issuer)


def get_cookie_manager(request: Request) -> CookieManager:
    return request.app.state.cookie_manager
