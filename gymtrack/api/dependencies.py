"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and database access.
"""

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from gymtrack.core.security import decode_access_token, oauth2_scheme
from gymtrack.db.session import get_db
from gymtrack.models.user import User
from gymtrack.services.user_service import UserService
from gymtrack.services.workout_service import WorkoutService


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db), ) -> User:
    """Extract and validate the current user from the JWT token."""
    user_id = decode_access_token(token)
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    user = UserService(db).get_user_by_id(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return user


def get_workout_service(db: Session = Depends(get_db), user: User = Depends(get_current_user), ) -> WorkoutService:
    return WorkoutService(db, user.id)
