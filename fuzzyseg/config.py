"""Shared configuration for fuzzy segment recognition.

This module centralizes default values used by:
    - fuzzyseg.api.services (SegmentService defaults)
    - configure_logging (log format)

Per-recognizer settings are constructor arguments; nothing here is mutated
at runtime.
"""

from __future__ import annotations
import logging
from fractions import Fraction

# Default width bound when the caller gives none
DEFAULT_WIDTH = Fraction(1)

# Default segment capacity (None = unbounded)
DEFAULT_MAX_SIZE = None

# Default thickness definition ('euclidean' or 'axis')
DEFAULT_WIDTH_MODE = 'euclidean'

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    Sets up logging with a consistent format across all modules. Call this
    once at application startup; the library itself never configures
    handlers.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.

    Example:
        Trace every extension attempt::

            from fuzzyseg.config import configure_logging
            configure_logging(level='DEBUG')
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')
