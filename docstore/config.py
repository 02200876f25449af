"""Storage configuration."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env so UPLOAD_DIR and LOG_LEVEL are available
load_dotenv()

# Directory holding stored files; created on first use, not at import
UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", "/data/uploads")).resolve()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for scripts and hosts that have not done so."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
