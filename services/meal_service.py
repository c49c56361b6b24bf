from datetime import datetime, timezone
from typing import Iterable, List
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealSummary
from repositories import MealRepository

logger = logging.getLogger("dailydiet.meals")


def best_on_diet_streak(flags: Iterable[bool]) -> int:
    """
    Length of the longest run of consecutive on-diet meals.

    ``flags`` must already be in meal_time order. An off-diet meal closes the
    current run; so does the end of the sequence. No meals gives 0.
    """
    runs: List[int] = []
    counter = 0
    for is_diet in flags:
        if is_diet:
            counter += 1
        else:
            runs.append(counter)
            counter = 0
    runs.append(counter)
    return max(runs)


def _normalize_meal_time(meal_time: datetime) -> datetime:
    # Meal times are kept in UTC; a time sent without an offset is read as UTC
    if meal_time.tzinfo is None:
        return meal_time.replace(tzinfo=timezone.utc)
    return meal_time.astimezone(timezone.utc)


class MealService:
    """Meal log operations. Every call is scoped to the resolved user_id."""

    @staticmethod
    def create_meal(db: Session, user_id: UUID, data: MealCreate) -> UUID:
        meal = MealRepository(db).create_meal(
            user_id=user_id,
            name=data.name,
            description=data.description,
            meal_time=_normalize_meal_time(data.meal_time),
            is_diet=data.is_diet,
        )
        logger.info(f"meal_created user_id={user_id} meal_id={meal.id}")
        return meal.id

    @staticmethod
    def update_meal(db: Session, user_id: UUID, meal_id: UUID, data: MealUpdate) -> None:
        """
        Replace name, description, meal_time and is_diet of a meal.

        Raises:
            NotFoundError: no meal with this id belongs to the user
        """
        count = MealRepository(db).update_for_user(
            user_id=user_id,
            meal_id=meal_id,
            name=data.name,
            description=data.description,
            meal_time=_normalize_meal_time(data.meal_time),
            is_diet=data.is_diet,
        )
        if not count:
            logger.warning(f"meal_update_missed user_id={user_id} meal_id={meal_id}")
            raise NotFoundError(f"Meal {meal_id} not found", code="MEAL_NOT_FOUND")
        logger.info(f"meal_updated user_id={user_id} meal_id={meal_id}")

    @staticmethod
    def delete_meal(db: Session, user_id: UUID, meal_id: UUID) -> None:
        """
        Raises:
            NotFoundError: no meal with this id belongs to the user
        """
        count = MealRepository(db).delete_for_user(user_id=user_id, meal_id=meal_id)
        if not count:
            logger.warning(f"meal_delete_missed user_id={user_id} meal_id={meal_id}")
            raise NotFoundError(f"Meal {meal_id} not found", code="MEAL_NOT_FOUND")
        logger.info(f"meal_deleted user_id={user_id} meal_id={meal_id}")

    @staticmethod
    def get_meal(db: Session, user_id: UUID, meal_id: UUID) -> Meal:
        meal = MealRepository(db).get_for_user(user_id=user_id, meal_id=meal_id)
        if meal is None:
            logger.warning(f"meal_not_found user_id={user_id} meal_id={meal_id}")
            raise NotFoundError(f"Meal {meal_id} not found", code="MEAL_NOT_FOUND")
        return meal

    @staticmethod
    def list_meals(db: Session, user_id: UUID) -> List[Meal]:
        """All of the user's meals, ascending by meal_time."""
        return MealRepository(db).list_for_user(user_id)

    @staticmethod
    def get_summary(db: Session, user_id: UUID) -> MealSummary:
        """
        Diet adherence over the user's whole history.

        Counts meals on and off the diet and finds the best on-diet streak
        in meal_time order.
        """
        flags = MealRepository(db).list_diet_flags(user_id)
        on_diet = sum(1 for is_diet in flags if is_diet)
        summary = MealSummary(
            total=len(flags),
            on_diet_count=on_diet,
            off_diet_count=len(flags) - on_diet,
            best_on_diet_streak=best_on_diet_streak(flags),
        )
        logger.info(
            f"meal_summary user_id={user_id} total={summary.total} "
            f"best_streak={summary.best_on_diet_streak}"
        )
        return summary
