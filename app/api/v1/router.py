"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import devotional, fasting

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    fasting.router, prefix="/fasting", tags=["Fasting"]
)
api_router.include_router(
    devotional.router, prefix="/devotional", tags=["Devotional progress"]
)
