"""
User Repository - Data access layer for users and their session tokens
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User
from app.exceptions import ConflictError


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.db.query(User).filter(User.email == email).first()

    def get_by_session_id(self, session_id: str) -> Optional[User]:
        """Get the user currently holding this session token"""
        return self.db.query(User).filter(User.session_id == session_id).first()

    def create_user(self, name: str, email: str, password: str) -> User:
        """Create a new user with no session token"""
        user = User(name=name, email=email, password=password, session_id=None)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(
                f"User with email {email} already exists", code="EMAIL_TAKEN"
            ) from e

    def set_session_id(self, user: User, session_id: str) -> User:
        """Overwrite the user's session token; any previous token stops resolving"""
        user.session_id = session_id
        return self.update(user)
