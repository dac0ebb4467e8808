"""
Local cache store.

Offline-first persistence: each user's snapshot is one JSON record in a
small key-value store backed by a directory (one ``<key>.json`` file per
key).  Loading always runs the daily rollover, and saving is a plain
last-write-wins overwrite of the whole record.
"""

import datetime
import os
import threading
from pathlib import Path
from typing import Optional, Union

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from gymtrack.core.config import settings
from gymtrack.schemas.user import UserProfile
from gymtrack.schemas.workout import WorkoutSnapshot
from gymtrack.stores.base import Change, StoreError, WorkoutStore
from gymtrack.tracker.defaults import DEFAULT_USERS, default_snapshot
from gymtrack.tracker.rollover import reconcile

_users_adapter = TypeAdapter(list[UserProfile])


class JsonFileStore:
    """String-keyed store of JSON documents, one file per key."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[bytes]:
        """Raw document bytes, decoded by the caller's validator (bad UTF-8 fails validation)."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, value: str) -> None:
        """Write *value* atomically (temp file + rename)."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, path)

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class LocalCacheStore(WorkoutStore):
    """Per-user snapshot persistence in a local key-value store."""

    writes_full_snapshot = True

    def __init__(self, directory: Union[str, Path, None] = None, key_prefix: str = settings.CACHE_KEY_PREFIX,
                 users_key: str = settings.USERS_KEY, ):
        self.kv = JsonFileStore(directory or settings.LOCAL_CACHE_DIR)
        self.key_prefix = key_prefix
        self.users_key = users_key
        self._lock = threading.RLock()

    def key_for(self, user_id: str) -> str:
        return f"{self.key_prefix}_{user_id}"

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_users(self) -> list[UserProfile]:
        """Stored user directory, re-seeded with the defaults when missing or unreadable."""
        raw = self.kv.get(self.users_key)
        if raw is not None:
            try:
                return _users_adapter.validate_json(raw)
            except ValidationError as e:
                logger.warning(f"User directory is unreadable, restoring defaults: {e}")
        users = [u.model_copy() for u in DEFAULT_USERS]
        self.kv.set(self.users_key, _users_adapter.dump_json(users).decode())
        return users

    def add_user(self, user: UserProfile) -> UserProfile:
        with self._lock:
            users = self.get_users()
            if any(u.id == user.id or u.access_code == user.access_code for u in users):
                raise StoreError(f"User '{user.id}' or its access code already exists")
            users.append(user)
            self.kv.set(self.users_key, _users_adapter.dump_json(users).decode())
        return user

    def authenticate(self, access_code: str) -> Optional[UserProfile]:
        return next((u for u in self.get_users() if u.access_code == access_code), None)

    def get_user(self, user_id: str) -> Optional[UserProfile]:
        return next((u for u in self.get_users() if u.id == user_id), None)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def _read(self, user_id: str, today: datetime.date) -> WorkoutSnapshot:
        raw = self.kv.get(self.key_for(user_id))
        if raw is None:
            logger.info(f"No cached snapshot for user {user_id}, seeding default routine")
            return default_snapshot(user_id, today)
        try:
            snapshot = WorkoutSnapshot.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Cached snapshot for user {user_id} is unreadable, seeding default routine: {e}")
            return default_snapshot(user_id, today)
        if snapshot.user_id != user_id:
            logger.warning(f"Cached snapshot under {self.key_for(user_id)} belongs to {snapshot.user_id}, ignoring it")
            return default_snapshot(user_id, today)
        return snapshot

    def load(self, user_id: str, today: Optional[datetime.date] = None) -> WorkoutSnapshot:
        """Load, roll over to *today* and, if the rollover changed anything, save back.

        The read-reconcile-write sequence holds the store lock so a date
        boundary is crossed exactly once.
        """
        today = today or datetime.date.today()
        with self._lock:
            stored = self._read(user_id, today)
            snapshot = reconcile(stored, today)
            if snapshot is not stored:
                self.save(snapshot)
        return snapshot

    def save(self, snapshot: WorkoutSnapshot) -> None:
        """Overwrite the user's record with *snapshot*."""
        try:
            with self._lock:
                self.kv.set(self.key_for(snapshot.user_id), snapshot.model_dump_json(by_alias=True))
        except OSError as e:
            raise StoreError(f"Could not write snapshot for user {snapshot.user_id}: {e}") from e

    def load_snapshot(self, user_id: str, today: datetime.date) -> WorkoutSnapshot:
        try:
            return self.load(user_id, today)
        except (OSError, StoreError) as e:
            logger.error(f"Local cache unavailable for user {user_id}, using default routine: {e}")
            return default_snapshot(user_id, today)

    def persist(self, snapshot: WorkoutSnapshot, change: Change) -> None:
        self.save(snapshot)

    def clear(self, user_id: str) -> None:
        with self._lock:
            self.kv.delete(self.key_for(user_id))
