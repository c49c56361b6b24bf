"""Services package - Business logic layer"""

from services.session_service import SessionService
from services.meal_service import MealService, best_on_diet_streak

__all__ = [
    "SessionService",
    "MealService",
    "best_on_diet_streak",
]
