"""
User-related database models.
"""

from sqlalchemy import Column, Text, TIMESTAMP, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class User(Base):
    """User account model"""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(Text, unique=True, nullable=False)
    # Stored as given; no hashing is performed
    password = Column(Text, nullable=False)
    session_id = Column(Text, unique=True, index=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    meals = relationship("Meal", back_populates="user", cascade="all, delete-orphan")
