"""API endpoints for geobounds."""

from fastapi import APIRouter

from . import bounds, morton

# Create a combined router for all API endpoints
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(bounds.router, tags=["bounds"])
api_router.include_router(morton.router, tags=["morton"])
