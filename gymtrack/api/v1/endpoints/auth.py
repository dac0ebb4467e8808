"""
Authentication endpoints.

Exchanges an access code for a bearer token.
"""

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session

from gymtrack.api.dependencies import get_current_user
from gymtrack.db.session import get_db
from gymtrack.models.user import User
from gymtrack.schemas.user import Token, UserLogin, UserResponse
from gymtrack.services.user_service import UserService

router = APIRouter()


@router.post("/login",
             summary="Login via OAuth2 form (for Swagger UI).",
             response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """
    Authenticate via OAuth2 form.

    Put the access code in the password field; the username is ignored.
    """
    service = UserService(db)
    return service.authenticate(UserLogin(access_code=form_data.password))


@router.post("/token",
             summary="Login via JSON.",
             response_model=Token)
def login_json(login_data: UserLogin, db: Session = Depends(get_db)):
    """
    Authenticate via JSON body.

    Args:
        login_data: Access code
        db: Database session

    Returns:
        JWT access token
    """
    service = UserService(db)
    return service.authenticate(login_data)


@router.get("/me",
            summary="Current user info.",
            response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return user
