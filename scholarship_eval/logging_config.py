"""Logging configuration shared by the CLI and the HTTP service."""

import logging
from typing import Optional

from scholarship_eval import config


def setup_logging(name: str, level: Optional[str] = None) -> logging.Logger:
    """Configure the root logger once and return the logger for `name`.

    Library modules only call logging.getLogger(__name__); handlers are
    installed here, by the entry points.
    """
    logging.basicConfig(
        level=getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    return logging.getLogger(name)
