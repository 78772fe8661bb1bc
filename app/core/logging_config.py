"""
Logging setup.

Module loggers are created with ``logging.getLogger(__name__)``; this
module only configures the root handler once per process.
"""

import logging
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger from ``settings.LOG_LEVEL``."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
