"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import goals, metrics, plans, profile, progress, samples

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    metrics.router, prefix="/metrics", tags=["Metrics"]
)
api_router.include_router(
    samples.router, prefix="/subjects", tags=["Physiological samples"]
)
api_router.include_router(
    profile.router, tags=["Athletic profile"]
)
api_router.include_router(
    plans.router, tags=["Plans"]
)
api_router.include_router(
    progress.router, tags=["Progress"]
)
api_router.include_router(
    goals.router, prefix="/subjects", tags=["Goals"]
)
