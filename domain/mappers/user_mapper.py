"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import User
from domain.schemas.user_schemas import UserRecord, LoginResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_record(user: User) -> UserRecord:
        """
        Convert User ORM model to UserRecord DTO.

        Args:
            user: User ORM instance

        Returns:
            UserRecord DTO carrying every column of the row
        """
        return UserRecord.model_validate(user)

    @staticmethod
    def to_login_response(user: User, token: str) -> LoginResponse:
        return LoginResponse(user=UserMapper.to_record(user), session_token=token)
