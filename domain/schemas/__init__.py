"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import (
    UserCreate,
    LoginRequest,
    UserRecord,
    UserListResponse,
    LoginResponse,
)
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealEnvelope,
    MealListResponse,
    MealSummary,
)

__all__ = [
    # User schemas
    "UserCreate",
    "LoginRequest",
    "UserRecord",
    "UserListResponse",
    "LoginResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealEnvelope",
    "MealListResponse",
    "MealSummary",
]
