"""
Main API router for MockPrep

Aggregates all API routes and provides the main application router.
"""

from fastapi import APIRouter

from mockprep.api.endpoints import analytics, interview, metadata, results

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    interview.router,
    prefix="/interview",
    tags=["Interview"]
)

api_router.include_router(
    results.router,
    prefix="/results",
    tags=["Results"]
)

api_router.include_router(
    analytics.router,
    prefix="/analytics",
    tags=["Analytics"]
)

api_router.include_router(
    metadata.router,
    prefix="/metadata",
    tags=["Metadata"]
)
