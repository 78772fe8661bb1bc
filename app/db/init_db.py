"""
Database initialization.

Creates all tables.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Initialize database schema.

    Creates all SQLModel tables on *bind* (the application engine by default).
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    if bind is None:
        from app.db.session import engine
        bind = engine

    logger.info("Creating database tables on %s", bind.url)
    SQLModel.metadata.create_all(bind)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
