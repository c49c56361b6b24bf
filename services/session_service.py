from typing import List, Optional, Tuple
from uuid import UUID
import logging
import secrets

from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import ConflictError, UnauthorizedError
from domain.models import User
from repositories import UserRepository

logger = logging.getLogger("dailydiet.session")


class SessionService:
    """Registration, login and session-token resolution"""

    @staticmethod
    def new_token(nbytes: Optional[int] = None) -> str:
        """Generate a random, unguessable session token"""
        return secrets.token_urlsafe(nbytes or settings.session_token_bytes)

    @staticmethod
    def register(db: Session, name: str, email: str, password: str) -> UUID:
        """
        Create a new user with no session token.

        Raises:
            ConflictError: if the email is already registered
        """
        user_repo = UserRepository(db)
        if user_repo.get_by_email(email) is not None:
            logger.warning(f"register_conflict email={email}")
            raise ConflictError(
                f"User with email {email} already exists", code="EMAIL_TAKEN"
            )

        # The unique constraint still guards concurrent registrations
        user = user_repo.create_user(name=name, email=email, password=password)
        logger.info(f"user_registered user_id={user.id}")
        return user.id

    @staticmethod
    def login(db: Session, email: str, password: str) -> Tuple[User, str]:
        """
        Check the credentials and issue a fresh session token.

        The new token overwrites the previous one, so at most one session is
        valid per user. Returns the full user row alongside the token.

        Raises:
            UnauthorizedError: unknown email or wrong password
        """
        user_repo = UserRepository(db)
        user = user_repo.get_by_email(email)
        if user is None:
            logger.warning(f"login_failed reason=email_not_found email={email}")
            raise UnauthorizedError("Email not found", code="EMAIL_NOT_FOUND")

        # Plain comparison; credentials are stored as given
        if user.password != password:
            logger.warning(f"login_failed reason=bad_credentials user_id={user.id}")
            raise UnauthorizedError("Bad credentials", code="BAD_CREDENTIALS")

        token = SessionService.new_token()
        user = user_repo.set_session_id(user, token)
        logger.info(f"login_succeeded user_id={user.id}")
        return user, token

    @staticmethod
    def resolve(db: Session, token: Optional[str]) -> UUID:
        """
        Map a presented session token to the id of the user holding it.

        Raises:
            UnauthorizedError: token missing, empty, or not held by any user
        """
        if not token:
            raise UnauthorizedError("Unauthenticated", code="UNAUTHENTICATED")

        user = UserRepository(db).get_by_session_id(token)
        if user is None:
            logger.info("session_rejected reason=unknown_token")
            raise UnauthorizedError("Unauthenticated", code="UNAUTHENTICATED")
        return user.id

    @staticmethod
    def list_users(db: Session) -> List[User]:
        """Return all users (no pagination, no authorization)."""
        return UserRepository(db).get_all()
