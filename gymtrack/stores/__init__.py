"""Persistence strategies behind the tracker façade."""

from gymtrack.stores.base import Change, ChangeKind, StoreError, WorkoutStore
from gymtrack.stores.local import JsonFileStore, LocalCacheStore
from gymtrack.stores.remote import RemoteSyncStore

__all__ = [
    "Change",
    "ChangeKind",
    "StoreError",
    "WorkoutStore",
    "JsonFileStore",
    "LocalCacheStore",
    "RemoteSyncStore",
]
