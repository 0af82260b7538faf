"""
Logger setup for Inkwell sessions.

Two entry points:
- setup_logger(): a build session with a DEBUG log file plus a console sink
- setup_console_logger(): console only, for read-only commands (posts, tags, check)

Context-specific wrappers with [content]/[index]/[render] prefixes live in
contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from inkwell import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def _apply_level_colors() -> None:
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)


def setup_console_logger(level: str = "WARNING") -> None:
    """
    Replace all sinks with a single stderr sink.

    Read-only commands print their results with typer on stdout, so log
    lines go to stderr and default to warnings only.

    Args:
        level: Minimum level shown (e.g., "DEBUG" for --verbose)
    """
    logger.remove()
    _apply_level_colors()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru for a build session.

    Writes everything at DEBUG to {log_dir}/{context_name}.log, mirrors
    console_level and above to stdout, and opens the log with a provenance
    header.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "render")
        log_dir: Directory for this session
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/build_tags_20261017_123456"),
            extra_provenance={"Site root": "blog/"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    _apply_level_colors()

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(
        sys.stdout,
        format="{time:HH:mm:ss} | " + CONSOLE_FORMAT,
        level=console_level,
        colorize=True,
    )

    log_provenance(context_name, extra_provenance)

    return log_file


def log_provenance(context_name: str, extra_context: Optional[dict] = None) -> None:
    """
    Log the session header: command line, working directory, versions, and
    any extra context such as the site root.
    """
    logger.info("=" * 80)
    logger.info(f"Inkwell {__version__} ({context_name} session)")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)
