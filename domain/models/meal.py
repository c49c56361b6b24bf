"""
Meal log database model.
"""

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, SmallInteger, Uuid, Index
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base


class Meal(Base):
    """A meal logged by a user"""

    __tablename__ = "meals"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    meal_time = Column(TIMESTAMP(timezone=True), nullable=False)
    # 1 = on diet, 0 = off diet; see MealRepository / MealMapper for the bool mapping
    is_diet = Column(SmallInteger, nullable=False, default=0)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False)

    # Relationships
    user = relationship("User", back_populates="meals")

    __table_args__ = (Index("ix_meals_user_id_meal_time", "user_id", "meal_time"),)
