"""
API v1 Router
Aggregates all v1 API routes
"""
from fastapi import APIRouter

from shorts_forge.api.v1.blueprint import router as blueprint_router
from shorts_forge.api.v1.blueprint import generate_blueprint
from shorts_forge.schemas.blueprint import Blueprint

# Main v1 router
api_router = APIRouter(prefix="/api/v1")

# Include sub-routers
api_router.include_router(blueprint_router)

# Unversioned path the web page posts to
legacy_router = APIRouter(prefix="/api", tags=["Blueprint"])
legacy_router.add_api_route(
    "/generate",
    generate_blueprint,
    methods=["POST"],
    response_model=Blueprint,
)
