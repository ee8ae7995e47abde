"""
Configuration du logging applicatif (niveau lu depuis LOG_LEVEL).
"""

import logging

from app.config import settings

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure le logging du processus une seule fois."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, settings.LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
