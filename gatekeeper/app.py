"""Application factory. No business logic; only wiring and middleware."""

import logging
import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from limits import parse
from slowapi import Limiter
from slowapi.util import get_remote_address

from gatekeeper import __version__
from gatekeeper.api import router
from gatekeeper.core.config import DEFAULT_JWT_SECRET, Settings
from gatekeeper.core.cookies import CookieManager
from gatekeeper.core.database import build_engine, build_session_factory
from gatekeeper.core.exceptions import register_exception_handlers
from gatekeeper.core.logging_config import configure_logging
from gatekeeper.core.middleware import AccessLogMiddleware
from gatekeeper.core.security import TokenIssuer

logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """Build the app; every component is constructed from the given settings."""
    configure_logging(settings)
    if settings.is_production and settings.JWT_SECRET.get_secret_value() == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is left at its default value; set it in the environment.")

    app = FastAPI(
        title="Gatekeeper API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_issuer = TokenIssuer(settings)
    app.state.cookie_manager = CookieManager(settings)
    app.state.started_at = time.monotonic()
    # Checked per request by api.deps.enforce_rate_limit.
    app.state.limiter = Limiter(
        key_func=get_remote_address,
        strategy="moving-window",
        enabled=settings.RATE_LIMIT_ENABLED,
    )
    app.state.rate_limit = parse(settings.RATE_LIMIT)

    register_exception_handlers(app)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Gatekeeper API"}

    @app.get("/api")
    def api_root() -> dict[str, str]:
        return {"message": "Gatekeeper API is running"}

    logger.info("Gatekeeper v%s configured (env=%s)", __version__, settings.APP_ENV)
    return app
