"""Logging setup shared by the CLI and the web app."""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: Optional[str] = None) -> None:
    """Configure the root logger with a single console handler.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR). Defaults to
            the SOLITAIRE_LOG_LEVEL environment variable, then INFO.
    """
    level_name = (log_level or os.getenv("SOLITAIRE_LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {level_name}")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)
