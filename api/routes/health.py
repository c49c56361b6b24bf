"""Health check route"""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
import logging

from api.dependencies import get_database
from domain.models import Database

router = APIRouter(tags=["Health"])
logger = logging.getLogger("dailydiet.api.health")


@router.get("/health-check")
def health_check(database: Database = Depends(get_database)):
    """Basic health check endpoint, including a round trip to the store"""
    try:
        database.ping()
        db_status = "ok"
    except SQLAlchemyError as e:
        logger.warning(f"Health check could not reach the database: {e}")
        db_status = "unavailable"
    return {"status": "ok", "service": "DailyDiet", "database": db_status}
