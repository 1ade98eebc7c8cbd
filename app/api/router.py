"""
API router.

Aggregates all endpoints.
"""

from fastapi import APIRouter

from app.api.endpoints import health, nutrition, users, workouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
api_router.include_router(
    nutrition.router, prefix="/nutrition", tags=["Nutrition"]
)
api_router.include_router(
    health.router, prefix="/health", tags=["Health & recovery"]
)
api_router.include_router(
    workouts.router, prefix="/workouts", tags=["Workouts"]
)
