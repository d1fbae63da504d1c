"""
Database initialization script.

Creates all tables (and the TimescaleDB extension when enabled) without
going through Alembic.  Handy for local SQLite runs.

Usage:
    python scripts/init_db.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.db.init_db import init_db

if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s [%(name)s] %(message)s")
    print("=" * 50)
    print("Momentum Database Initialization")
    print("=" * 50)

    try:
        init_db()
    except SQLAlchemyError as e:
        print()
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        sys.exit(1)

    print("SUCCESS: Database initialized!")
