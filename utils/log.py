# utils/log.py

"""
Logging utilities:
- root logger setup (stdout, one format for every module)
- module loggers
"""

import logging
import sys

from settings.constants import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = LOG_LEVEL, format_string: str = LOG_FORMAT) -> None:
    """Configures the root logger once; later calls are no-ops."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__), configuring the root logger if needed."""
    if not logging.getLogger().handlers:
        setup_logging()

    return logging.getLogger(name)
