"""
Development server launcher.

Loads .env file and runs the store API with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.logging_config import configure_logging

logger = logging.getLogger("run_dev")

if __name__ == "__main__":
    configure_logging()
    logger.info("Starting Devotion Companion store on http://localhost:8000 (docs at /docs)")
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
