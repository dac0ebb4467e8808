"""
Abstract base class for workout persistence strategies.

The tracker façade applies every mutation to its in-memory snapshot and
then hands the result to a :class:`WorkoutStore`.  A strategy decides
how much of it to write:

- the local cache rewrites the whole snapshot,
- the remote store issues the one relational operation the change needs.

Strategies raise :class:`StoreError` for any write they could not
complete.
"""

import datetime
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from gymtrack.schemas.user import UserProfile
from gymtrack.schemas.workout import WorkoutSnapshot


class StoreError(Exception):
    """A persistence backend failed to read or write."""


class ChangeKind(str, Enum):
    """Mutation that produced the snapshot being persisted."""
    SELECT_DAY = "select_day"
    ROLLOVER = "rollover"
    ADD_DAY = "add_day"
    REMOVE_DAY = "remove_day"
    ADD_WORKOUT = "add_workout"
    UPDATE_WORKOUT = "update_workout"
    REMOVE_WORKOUT = "remove_workout"
    SAVE_SETS = "save_sets"
    COMPLETE_DAY = "complete_day"


class Change(BaseModel):
    """What changed, identified by the ids of the touched records."""

    kind: ChangeKind
    day_id: Optional[str] = None
    workout_id: Optional[str] = None

    @property
    def record_id(self) -> str:
        """Id of the most specific record touched."""
        return self.workout_id or self.day_id or self.kind.value


class WorkoutStore(ABC):
    """Interface every persistence strategy implements."""

    #: True when every successful ``persist`` writes the entire snapshot.
    writes_full_snapshot: bool = False

    @abstractmethod
    def authenticate(self, access_code: str) -> Optional[UserProfile]:
        """Exact-match lookup of a user by access code.  ``None`` if unknown."""
        ...

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserProfile]:
        """Lookup by id, used to re-validate a restored session."""
        ...

    @abstractmethod
    def load_snapshot(self, user_id: str, today: datetime.date) -> WorkoutSnapshot:
        """Return the user's snapshot as of *today*.  Never raises."""
        ...

    @abstractmethod
    def persist(self, snapshot: WorkoutSnapshot, change: Change) -> None:
        """Persist *change*, already applied to *snapshot*.

        Raises:
            StoreError: if the write did not complete
        """
        ...
