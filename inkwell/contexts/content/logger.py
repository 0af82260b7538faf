"""
Content context logger.

Provides logging interface for content context with automatic [content] prefix.
All content modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[content]"


def _log_info(message: str) -> None:
    """Log info message with [content] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [content] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [content] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [content] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [content] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_load_result(posts_dir: Path, result, elapsed_time: float) -> None:
    """
    Log the outcome of load_posts().

    Args:
        posts_dir: Directory that was read
        result: LoadResult from load_posts()
        elapsed_time: Time taken
    """
    summary = (
        f"Loaded {len(result.posts)} posts from {posts_dir} "
        f"({len(result.skipped)} skipped, {len(result.errors)} errors, {elapsed_time:.2f}s)"
    )
    if result.errors:
        _log_warning(summary)
        for path, message in result.errors:
            _log_error(f"  {path.name}: {message.splitlines()[0]}")
    else:
        _log_success(summary)
