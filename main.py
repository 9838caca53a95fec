from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Core
from core.config import settings
from core.config_validator import validate_config_on_startup
from core.logging_config import logger
from core.rate_limiter import reset_rate_limits
from core.sessions import SessionRegistry
from core.store import EntityStore

# -------------------------------------------------
# Routers
# -------------------------------------------------
from routers.auth import router as auth_router
from routers.condos import router as condos_router
from routers.dashboard import router as dashboard_router
from routers.residents import router as residents_router
from routers.providers import router as providers_router
from routers.meetings import router as meetings_router
from routers.notices import router as notices_router
from routers.financials import router as financials_router
from routers.messages import router as messages_router
from routers.health import router as health_router


# -------------------------------------------------
# Create the Application
# -------------------------------------------------
def create_app(store: Optional[EntityStore] = None) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="SyndicPro API: condominium management for síndicos and moradores",
    )

    # -------------------------------------------------
    # In-memory state (lost on restart)
    # -------------------------------------------------
    if store is None:
        store = EntityStore.seeded() if settings.SEED_SAMPLE_DATA else EntityStore()
    app.state.store = store
    app.state.sessions = SessionRegistry(store)
    reset_rate_limits()

    # -------------------------------------------------
    # CORS
    # -------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------
    # Startup logging
    # -------------------------------------------------
    @app.on_event("startup")
    async def on_startup():
        logger.info("🚀 Starting SyndicPro API")
        validate_config_on_startup()
        for route in app.routes:
            methods = ",".join(sorted(getattr(route, "methods", None) or []))
            logger.debug(f"➡️ {methods:10s} {getattr(route, 'path', '')}")
        logger.info(f"✅ {len(app.state.store.condos)} condominium(s) loaded")

    # -------------------------------------------------
    # Error handling
    # -------------------------------------------------
    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (401, 403, 500):
            logger.warning(
                f"HTTP {exc.status_code} at {request.url}: {exc.detail}"
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.error("Unhandled error at %s", request.url, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    # -------------------------------------------------
    # Register Routers
    # -------------------------------------------------

    # Auth
    app.include_router(auth_router)

    # Manager dashboard
    app.include_router(condos_router)
    app.include_router(dashboard_router)

    # Core Data Routers
    app.include_router(residents_router)
    app.include_router(providers_router)
    app.include_router(meetings_router)
    app.include_router(notices_router)
    app.include_router(financials_router)
    app.include_router(messages_router)

    # Health
    app.include_router(health_router)

    return app


# Create the global FastAPI instance
app = create_app()
