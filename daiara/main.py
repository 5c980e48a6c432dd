"""
FastAPI application factory.

Assembles the app, registers all routers, maps domain exceptions to
HTTP responses, and wires up lifecycle events.  Database schema is
managed by Alembic — NOT create_all.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from daiara.controllers.artwork_controller import router as artwork_router
from daiara.controllers.screen_controller import router as screen_router
from daiara.controllers.session_controller import router as session_router
from daiara.controllers.wallet_controller import router as wallet_router
from daiara.core.config import settings
from daiara.core.database import engine
from daiara.core.exceptions import DaiaraError
from daiara.models import Base  # noqa: F401 — ensures all models are registered

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


async def handle_daiara_error(request: Request, exc: DaiaraError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.reason,
            exc_info=exc,
        )
    else:
        logger.info(
            "%s %s rejected (%s): %s",
            request.method, request.url.path, exc.status_code, exc.reason,
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Register routers ─────────────────────────────────────────────
    app.include_router(screen_router)
    app.include_router(session_router)
    app.include_router(wallet_router)
    app.include_router(artwork_router)

    app.add_exception_handler(DaiaraError, handle_daiara_error)

    # ── Shutdown ─────────────────────────────────────────────────────
    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await engine.dispose()
        logger.info("Database engine disposed.")

    # ── Health check ─────────────────────────────────────────────────
    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
