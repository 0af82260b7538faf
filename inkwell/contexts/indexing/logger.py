"""
Indexing context logger.

Provides logging interface for indexing context with automatic [index] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[index]"


def _log_info(message: str) -> None:
    """Log info message with [index] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [index] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [index] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
