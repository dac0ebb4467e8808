"""
User repository.

Users are created by the seed process and looked up by id or by their
access code.  Codes are matched exactly (case-sensitive, no trimming).
"""

from typing import Optional

from sqlmodel import Session, select

from gymtrack.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_access_code(self, access_code: str) -> Optional[User]:
        statement = select(User).where(User.access_code == access_code)
        return self.session.exec(statement).first()

    def exists_by_access_code(self, access_code: str) -> bool:
        return self.get_by_access_code(access_code) is not None
