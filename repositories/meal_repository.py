"""
Meal Repository - Data access layer for meal logs.

Every query here is keyed by ``user_id`` in addition to the meal id, so a
caller can never read or change another user's rows.
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_store_flag(is_diet: bool) -> int:
    return 1 if is_diet else 0


def from_store_flag(value) -> bool:
    return bool(value)


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access, scoped by owner"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def create_meal(
        self,
        user_id: UUID,
        name: str,
        description: str,
        meal_time: datetime,
        is_diet: bool,
    ) -> Meal:
        """Insert a meal with a fresh id; created_at and updated_at start equal"""
        now = _utc_now()
        meal = Meal(
            user_id=user_id,
            name=name,
            description=description,
            meal_time=meal_time,
            is_diet=to_store_flag(is_diet),
            created_at=now,
            updated_at=now,
        )
        return self.create(meal)

    def get_for_user(self, user_id: UUID, meal_id: UUID) -> Optional[Meal]:
        """Get a meal only if it belongs to the user"""
        return (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == user_id)
            .first()
        )

    def list_for_user(self, user_id: UUID) -> List[Meal]:
        """All meals of a user, ascending by meal_time"""
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.meal_time.asc(), Meal.created_at.asc())
            .all()
        )

    def list_diet_flags(self, user_id: UUID) -> List[bool]:
        """The is_diet flags of a user's meals, in meal_time order"""
        rows = (
            self.db.query(Meal.is_diet)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.meal_time.asc(), Meal.created_at.asc())
            .all()
        )
        return [from_store_flag(row.is_diet) for row in rows]

    def update_for_user(
        self,
        user_id: UUID,
        meal_id: UUID,
        name: str,
        description: str,
        meal_time: datetime,
        is_diet: bool,
    ) -> int:
        """Replace the mutable fields of a user's meal. Returns the number of rows updated"""
        count = (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == user_id)
            .update(
                {
                    Meal.name: name,
                    Meal.description: description,
                    Meal.meal_time: meal_time,
                    Meal.is_diet: to_store_flag(is_diet),
                    Meal.updated_at: _utc_now(),
                },
                synchronize_session="fetch",
            )
        )
        self.db.commit()
        return count

    def delete_for_user(self, user_id: UUID, meal_id: UUID) -> int:
        """Hard-delete a user's meal. Returns the number of rows deleted"""
        count = (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == user_id)
            .delete(synchronize_session="fetch")
        )
        self.db.commit()
        return count
