"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.exceptions import (
    ConcurrencyConflict,
    IncompletePlanInput,
    InvalidEvent,
    InvalidInput,
    MomentumError,
    NotFound,
)
from app.api.v1.router import api_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Derived body metrics, periodized plans and activity progress tracking.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")


_STATUS_BY_ERROR: dict[type, int] = {
    InvalidInput: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidEvent: status.HTTP_422_UNPROCESSABLE_ENTITY,
    IncompletePlanInput: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotFound: status.HTTP_404_NOT_FOUND,
    ConcurrencyConflict: status.HTTP_409_CONFLICT,
}


@app.exception_handler(MomentumError)
async def momentum_error_handler(request: Request, exc: MomentumError):
    code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if code >= 500:
        log.error("Unhandled %s on %s: %s", exc.kind, request.url.path, exc.message)
    body = {"error": exc.kind, "detail": exc.message}
    if isinstance(exc, IncompletePlanInput):
        body["missing"] = exc.missing
    return JSONResponse(status_code=code, content=body)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Momentum API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "momentum-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL
    }
