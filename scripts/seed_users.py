"""
User seeding script.

Users are not self-registered: an operator creates them here with the
access code they will log in with, optionally with the default
push / pull / legs routine.

Usage:
    python scripts/seed_users.py NAME ACCESS_CODE [--with-routine]
    python scripts/seed_users.py NAME ACCESS_CODE --local [--with-routine]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from fastapi import HTTPException
from sqlmodel import Session

from gymtrack.db.init_db import init_db
from gymtrack.db.session import engine
from gymtrack.schemas.user import UserCreate, UserProfile
from gymtrack.services.user_service import UserService
from gymtrack.stores.base import StoreError
from gymtrack.stores.local import LocalCacheStore
from gymtrack.stores.remote import RemoteSyncStore
from gymtrack.tracker.defaults import default_routine


def seed_remote(name: str, access_code: str, with_routine: bool) -> str:
    init_db(engine)
    with Session(engine) as session:
        user = UserService(session).register(UserCreate(name=name, access_code=access_code))
        if with_routine:
            RemoteSyncStore(session).seed_routine(user.id, default_routine())
        return user.id


def seed_local(name: str, access_code: str) -> str:
    store = LocalCacheStore()
    user_id = name.strip().lower().replace(" ", "-")
    store.add_user(UserProfile(id=user_id, name=name, access_code=access_code))
    return user_id


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create a user with an access code.")
    parser.add_argument("name")
    parser.add_argument("access_code")
    parser.add_argument("--with-routine", action="store_true", help="Seed the default routine (remote only)")
    parser.add_argument("--local", action="store_true", help="Add to the local user directory instead")
    args = parser.parse_args()

    try:
        if args.local:
            # Local users get the default routine on first load anyway.
            created = seed_local(args.name, args.access_code)
        else:
            created = seed_remote(args.name, args.access_code, args.with_routine)
    except (HTTPException, StoreError) as e:
        detail = e.detail if isinstance(e, HTTPException) else str(e)
        print(f"ERROR: {detail}")
        sys.exit(1)

    print(f"Created user {args.name} (id {created})")
