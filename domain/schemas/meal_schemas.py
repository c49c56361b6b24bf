from pydantic import BaseModel, ConfigDict, Field, StrictBool
from typing import List
from datetime import datetime
from uuid import UUID


class MealCreate(BaseModel):
    """Body of POST /meals and PUT /meals/{meal_id}."""

    name: str = Field(..., max_length=200)
    description: str = Field(..., max_length=2000)
    meal_time: datetime = Field(..., alias="mealTime")
    is_diet: StrictBool = Field(..., alias="isDiet")

    model_config = ConfigDict(populate_by_name=True)


# Update replaces every mutable field, so it shares the create shape
MealUpdate = MealCreate


class MealResponse(BaseModel):
    id: UUID
    user_id: UUID
    name: str
    description: str
    meal_time: datetime
    is_diet: bool
    created_at: datetime
    updated_at: datetime


class MealEnvelope(BaseModel):
    meal: MealResponse


class MealListResponse(BaseModel):
    meals: List[MealResponse]


class MealSummary(BaseModel):
    """Diet adherence statistics over all of a user's meals."""

    total: int = Field(..., ge=0, alias="mealsQuantity")
    on_diet_count: int = Field(..., ge=0, alias="mealsOnDietQuantity")
    off_diet_count: int = Field(..., ge=0, alias="mealsOffDietQuantity")
    best_on_diet_streak: int = Field(..., ge=0, alias="bestOnDietSequence")

    model_config = ConfigDict(populate_by_name=True)
