"""
Development server launcher.

Loads .env and serves the API with uvicorn, reloading on code changes
unless told otherwise.

Usage:
    python scripts/run_dev.py [--host HOST] [--port PORT] [--no-reload]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from gymtrack.core.config import settings

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the GymTrack API for development.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true")
    args = parser.parse_args()

    base = f"http://{args.host}:{args.port}"
    print(f"{settings.PROJECT_NAME} {settings.VERSION} (debug={settings.DEBUG})")
    print(f"API:  {base}/api/v1")
    print(f"Docs: {base}/docs")
    print("Log in with POST /api/v1/auth/token and an access code, e.g. DEMO2024 after init_db.py --demo")

    uvicorn.run("gymtrack.main:app", host=args.host, port=args.port, reload=not args.no_reload,
                log_level=settings.LOG_LEVEL.lower())
