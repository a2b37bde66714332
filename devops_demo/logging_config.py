import logging
import os
from typing import Optional

from .core.config import parse_log_level

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level_name: Optional[str] = None) -> None:
    """Configure plain console logging.

    Controlled by LOG_LEVEL=DEBUG|INFO|WARNING|ERROR|CRITICAL (default INFO);
    unknown names fall back to INFO. uvicorn keeps its own handlers for its
    loggers.
    """
    if level_name is None:
        level_name = os.getenv("LOG_LEVEL")
    level = getattr(logging, parse_log_level(level_name))

    # Avoid double-config when called more than once.
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(level=level, format=LOG_FORMAT)
