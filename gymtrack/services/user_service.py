"""
User service.

Business logic for access-code authentication and user seeding.
"""

from datetime import timedelta
from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from gymtrack.core.config import settings
from gymtrack.core.security import create_access_token
from gymtrack.db.repositories.user import UserRepository
from gymtrack.models.user import User
from gymtrack.schemas.user import Token, UserCreate, UserLogin


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)

    def register(self, user_data: UserCreate) -> User:
        """
        Create a user (administrative seed process only).

        Args:
            user_data: Name and access code

        Returns:
            Created user

        Raises:
            HTTPException: If the access code is already taken
        """
        if self.repository.exists_by_access_code(user_data.access_code):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Access code already in use")

        user = User(name=user_data.name, access_code=user_data.access_code)
        return self.repository.create(user)

    def authenticate(self, login_data: UserLogin) -> Token:
        """
        Exchange an access code for an access token.

        Args:
            login_data: Access code

        Returns:
            JWT access token

        Raises:
            HTTPException: If the access code is unknown
        """
        user = self.repository.get_by_access_code(login_data.access_code.strip())
        if not user:
            logger.warning("Login rejected: unknown access code")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid access code",
                                headers={ "WWW-Authenticate": "Bearer" }, )

        access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(data={ "sub": user.id }, expires_delta=access_token_expires)
        return Token(access_token=access_token, token_type="bearer")

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        return self.repository.get_by_id(user_id)
