"""
Application session.

Holds who is logged in on this device.  The identity is remembered in a
small credential file (user id and name, never the access code) so the
app can :meth:`~AppSession.restore` it on the next start; the stored
reference is re-checked against the store before it is trusted.
"""

import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from loguru import logger
from pydantic import BaseModel, ValidationError

from gymtrack.core.config import settings
from gymtrack.schemas.user import UserProfile
from gymtrack.services.tracker import WorkoutTracker
from gymtrack.stores.base import WorkoutStore


class CredentialReference(BaseModel):
    """What is written to disk for a logged-in user."""
    user_id: str
    name: str


class AppSession:
    """Login state of the top-level application controller."""

    def __init__(self, store: WorkoutStore, session_file: Union[str, Path, None] = None,
                 clock: Callable[[], datetime.date] = datetime.date.today, ):
        self.store = store
        self.session_file = Path(session_file or settings.SESSION_FILE)
        self.clock = clock
        self.current_user: Optional[UserProfile] = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def restore(self) -> Optional[UserProfile]:
        """Log back in from the persisted credential reference, if it is still valid."""
        if not self.session_file.exists():
            return None
        try:
            reference = CredentialReference.model_validate_json(self.session_file.read_bytes())
        except (OSError, ValidationError) as e:
            logger.warning(f"Discarding unreadable session file {self.session_file}: {e}")
            self._forget()
            return None

        user = self.store.get_user(reference.user_id)
        if user is None:
            logger.warning(f"Stored session refers to unknown user {reference.user_id}, clearing it")
            self._forget()
            return None
        self.current_user = user
        logger.info(f"Restored session for user {user.id}")
        return user

    def login(self, access_code: str) -> Optional[UserProfile]:
        """Authenticate by access code and remember the user.  None if the code is unknown."""
        user = self.store.authenticate(access_code.strip())
        if user is None:
            logger.warning("Login rejected: unknown access code")
            return None
        self.current_user = user
        self.session_file.parent.mkdir(parents=True, exist_ok=True)
        self.session_file.write_text(CredentialReference(user_id=user.id, name=user.name).model_dump_json(),
                                     encoding="utf-8")
        logger.info(f"User {user.id} logged in")
        return user

    def logout(self) -> None:
        if self.current_user:
            logger.info(f"User {self.current_user.id} logged out")
        self.current_user = None
        self._forget()

    def open_tracker(self) -> WorkoutTracker:
        """Tracker façade for the logged-in user, with the snapshot loaded."""
        if self.current_user is None:
            raise PermissionError("No user is logged in")
        tracker = WorkoutTracker(self.store, self.current_user.id, clock=self.clock)
        tracker.load()
        return tracker

    def _forget(self) -> None:
        self.session_file.unlink(missing_ok=True)
