from __future__ import annotations
import logging
from typing import Optional
from .reader import get_string

# Runtime config (override via env vars)
LOG_LEVEL = get_string("ENVREADER_LOG_LEVEL", "warning")

def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Set the ``envreader`` logger level; an unknown name falls back to WARNING."""
    name = (level or LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logger = logging.getLogger("envreader")
    logger.setLevel(resolved)
    return logger
