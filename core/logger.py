"""
Centralized logging with environment-based modes.

Modes (set via LOG_MODE secret or environment variable):
- 'debug': Verbose output, including per-keyword intent decisions
- 'info': Batch-level output (default)
- 'production': Errors only
"""
import logging
import sys
from typing import Optional

BASE_LOGGER = "keyword_intent"


def setup_logger(mode: Optional[str] = None) -> logging.Logger:
    """
    Create and configure the base logger.

    Usage:
        from core.logger import get_logger
        logger = get_logger(__name__)
        logger.debug("Only shows in debug mode")

    Args:
        mode: Logging mode; read from settings when omitted

    Returns:
        The configured base logger
    """
    if mode is None:
        from config.settings import get_settings
        mode = get_settings().log_mode

    logger = logging.getLogger(BASE_LOGGER)

    if mode == "debug":
        logger.setLevel(logging.DEBUG)
    elif mode == "production":
        logger.setLevel(logging.ERROR)
    else:
        logger.setLevel(logging.INFO)

    # Avoid duplicate handlers on Streamlit reruns
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)  # Let logger level control what's shown

    if mode == "debug":
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%H:%M:%S"
        )
    else:
        formatter = logging.Formatter("[%(levelname)s] %(message)s")

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child of the base logger for a module."""
    if name:
        return logging.getLogger(f"{BASE_LOGGER}.{name}")
    return logging.getLogger(BASE_LOGGER)
