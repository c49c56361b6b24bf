"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from domain.models import Database
from services.session_service import SessionService


def get_database(request: Request) -> Database:
    """The store handle opened by the application lifespan"""
    return request.app.state.database


def get_db(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from database.session_scope()


def get_session_token(request: Request) -> Optional[str]:
    """Session token from the session cookie, or from an ``Authorization: Bearer`` header"""
    cookie_name = request.app.state.settings.session_cookie_name
    cookie = request.cookies.get(cookie_name)
    if cookie:
        return cookie
    auth = request.headers.get("authorization") or ""
    if auth.lower().startswith("bearer "):
        token = auth.split(" ", 1)[1].strip()
        return token or None
    return None


def get_current_user_id(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> UUID:
    """
    Resolve the acting user. Raises UnauthorizedError (401) before the
    route handler runs when the token is missing or unknown.
    """
    return SessionService.resolve(db, token)
