"""
Logging setup.

Engine modules log through ``logging.getLogger(__name__)``; this module
configures the root logger once, from ``settings.LOG_LEVEL``.
"""

import logging
from typing import Optional

from app.core.config import settings


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name to its numeric value (INFO when unknown)."""
    name = (level or settings.LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=resolve_level(level), format=settings.LOG_FORMAT)
