"""
Database initialization script.

Creates the GymTrack tables on the configured database (use Alembic for
PostgreSQL deployments that are already running) and can add the demo
user with the default routine for a quick local setup.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --demo
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy import inspect
from sqlmodel import Session

from gymtrack.db.init_db import init_db
from gymtrack.db.repositories.user import UserRepository
from gymtrack.db.session import engine
from gymtrack.models.user import User
from gymtrack.stores.remote import RemoteSyncStore
from gymtrack.tracker.defaults import DEFAULT_USERS, default_routine


def seed_demo_users() -> list[str]:
    """Insert the default users (with the default routine) that are not there yet."""
    created = []
    with Session(engine) as session:
        repository = UserRepository(session)
        for profile in DEFAULT_USERS:
            if repository.exists_by_access_code(profile.access_code):
                continue
            user = repository.create(User(name=profile.name, access_code=profile.access_code))
            RemoteSyncStore(session).seed_routine(user.id, default_routine())
            created.append(f"{user.name} ({profile.access_code})")
    return created


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the GymTrack tables.")
    parser.add_argument("--demo", action="store_true", help="Also add the demo user and its routine")
    args = parser.parse_args()

    print("=" * 50)
    print("GymTrack Database Initialization")
    print(f"Database: {engine.url.render_as_string(hide_password=True)}")
    print("=" * 50)

    try:
        init_db(engine)
        print(f"Tables: {', '.join(sorted(inspect(engine).get_table_names()))}")
        if args.demo:
            seeded = seed_demo_users()
            print(f"Demo users added: {', '.join(seeded) if seeded else 'none (already present)'}")
    except Exception as e:
        print(f"ERROR: Database initialization failed: {e}")
        sys.exit(1)

    print("SUCCESS: Database initialized")
