#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
FileWiki — FastAPI application factory
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from filewiki.core.config import get_settings
from filewiki.routes import frontend, pages
from filewiki.services.errors import PageError
from filewiki.storage import get_storage

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    log.info("Serving pages from %r", get_storage())
    yield


# -----------------------------------------------------------------------------

def create_app() -> FastAPI:
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="A file-backed wiki serving Markdown pages as sanitised HTML.",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ── CORS ──────────────────────────────────────────────────────────────

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Global exception handlers ─────────────────────────────────────────

    @app.exception_handler(PageError)
    async def page_error(request: Request, exc: PageError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    # ── Health check ──────────────────────────────────────────────────────

    @app.get("/api/health", tags=["system"])
    async def health():
        return {"status": "ok", "version": settings.app_version, "app": settings.app_name}

    # ── API routers ───────────────────────────────────────────────────────

    app.include_router(pages.router, prefix="/api")

    # ── Frontend (catch-all, must come last) ──────────────────────────────

    app.include_router(frontend.router)

    return app


# -----------------------------------------------------------------------------

app = create_app()


# -----------------------------------------------------------------------------
