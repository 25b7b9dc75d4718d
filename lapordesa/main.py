from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lapordesa.api.router import router as api_router
from lapordesa.config.settings import Settings, get_settings
from lapordesa.core.context import build_context
from lapordesa.core.logging import get_logger, setup_logging
from lapordesa.core.middleware import register_exception_handlers, register_middlewares
from lapordesa.db.init_db import init_db
from lapordesa.services.media import MediaStorage

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    media_storage: Optional[MediaStorage] = None,
) -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures logging and builds the application context from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the API router under API_PREFIX.
    - Creates missing tables on start-up outside production.
    """
    settings = settings or get_settings()
    setup_logging(settings)
    context = build_context(settings, media_storage=media_storage)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not settings.is_production():
            # For dev/demo only; production schemas are managed by migrations
            init_db(context.engine)
        logger.info(f"{settings.APP_NAME} started", extra={"environment": settings.ENVIRONMENT})
        yield
        context.engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        lifespan=lifespan,
    )
    app.state.context = context

    # Credentials cannot be combined with a wildcard origin
    allow_all = not settings.CORS_ORIGINS or settings.CORS_ORIGINS == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.CORS_ORIGINS,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )

    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/", include_in_schema=False)
    def root() -> dict:
        return {"message": f"{settings.APP_NAME} berjalan"}

    return app
