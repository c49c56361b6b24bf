"""
Meal domain mappers.
Handles transformation between Meal ORM rows and response DTOs.
"""

from datetime import datetime, timezone

from domain.models import Meal
from domain.schemas.meal_schemas import MealResponse


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without an offset; they were written in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class MealMapper:
    """Mapper for meal-related transformations."""

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        """
        Convert Meal ORM model to MealResponse DTO.

        The store keeps ``is_diet`` as 0/1; the response exposes a boolean.
        Timestamps always carry their UTC offset.
        """
        return MealResponse(
            id=meal.id,
            user_id=meal.user_id,
            name=meal.name,
            description=meal.description,
            meal_time=_as_utc(meal.meal_time),
            is_diet=bool(meal.is_diet),
            created_at=_as_utc(meal.created_at),
            updated_at=_as_utc(meal.updated_at),
        )
