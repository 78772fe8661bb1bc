"""
Database initialization script.

Run this script to create database tables.

Usage:
    python scripts/init_db.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.logging_config import configure_logging
from app.db.init_db import init_db

logger = logging.getLogger("init_db")

if __name__ == "__main__":
    configure_logging()
    try:
        init_db()
    except Exception:
        logger.exception("Database initialization failed")
        sys.exit(1)
    logger.info("Database initialized")
    sys.exit(0)
