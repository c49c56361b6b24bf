"""Meal log and diet summary routes"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db, get_current_user_id
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealEnvelope,
    MealListResponse,
    MealSummary,
)
from domain.mappers import MealMapper
from services.meal_service import MealService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("dailydiet.api.meals")


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    meal: MealCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Log a meal for the authenticated user. Responds 201 with an empty body."""
    MealService.create_meal(db, user_id, meal)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=MealListResponse)
def list_meals(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """All meals of the authenticated user, ascending by meal time."""
    meals = MealService.list_meals(db, user_id)
    return MealListResponse(meals=[MealMapper.to_response(m) for m in meals])


# Declared before /{meal_id} so "summary" is never read as an id
@router.get("/summary", response_model=MealSummary, response_model_by_alias=True)
def get_summary(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Diet adherence statistics:
    mealsQuantity, mealsOnDietQuantity, mealsOffDietQuantity and
    bestOnDietSequence (longest run of consecutive on-diet meals).
    """
    return MealService.get_summary(db, user_id)


@router.get("/{meal_id}", response_model=MealEnvelope)
def get_meal(
    meal_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get one meal. Responds 404 if it does not exist or belongs to someone else."""
    meal = MealService.get_meal(db, user_id, meal_id)
    return MealEnvelope(meal=MealMapper.to_response(meal))


@router.put("/{meal_id}", response_class=Response)
def update_meal(
    meal_id: UUID,
    meal: MealUpdate,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Replace a meal's name, description, meal time and diet flag.

    Raises:
        400: meal does not exist or belongs to someone else
    """
    try:
        MealService.update_meal(db, user_id, meal_id, meal)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{meal_id}", response_class=Response)
def delete_meal(
    meal_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Delete a meal.

    Raises:
        400: meal does not exist or belongs to someone else
    """
    try:
        MealService.delete_meal(db, user_id, meal_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return Response(status_code=status.HTTP_200_OK)
