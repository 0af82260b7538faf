"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from inkwell.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path, site_root: Path, output_format: str = "html", console_level: str = "INFO"
) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        site_root: Site being built
        output_format: "html" or "markdown"
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file

    Example:
        from inkwell.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, Path("blog"))
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Site root": site_root, "Output format": output_format},
        console_level=console_level,
    )


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_page_written(output_path: Path, tag_count: int, elapsed_time: float) -> None:
    """Log a successfully written page."""
    _log_success(f"Wrote tag page with {tag_count} tags ({elapsed_time:.2f}s)")
    _log_info(f"  Output: {output_path}")
