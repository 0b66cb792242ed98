"""Loguru setup shared by the redirect host adapters."""

import os
import sys
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | {message}"

_configured = False


def setup_logging(level: Optional[str] = None, force: bool = False) -> str:
    """Configure a single stderr sink. Level defaults to $LOG_LEVEL or INFO.

    Runs once per process unless force=True (warm Lambda containers reuse
    the module). Returns the level in effect.
    """
    global _configured
    load_dotenv()
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    if _configured and not force:
        return level

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    _configured = True
    return level
