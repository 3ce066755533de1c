"""
Logging configuration for the swaps core.
"""
from __future__ import annotations

import logging
import os
import sys
import tempfile
from pathlib import Path

from loguru import logger

# Lazy import settings to avoid circular dependency
_settings = None

_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def _get_settings():
    """Get settings with lazy loading."""
    global _settings
    if _settings is None:
        from swaps.settings.config import settings as app_settings
        _settings = app_settings
    return _settings


def _resolve_log_path(default_path: Path) -> Path:
    try:
        default_path.parent.mkdir(parents=True, exist_ok=True)
        return default_path
    except OSError:
        fallback_dir = Path(tempfile.gettempdir()) / "swaps_logs"
        fallback_dir.mkdir(parents=True, exist_ok=True)
        return fallback_dir / default_path.name


class LoguruHandler(logging.Handler):
    """Forward standard library log records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def setup_logging():
    """Configure loguru logger with appropriate settings."""
    settings = _get_settings()

    logger.remove()
    logger.configure(extra={"app": settings.app_name, "environment": settings.environment})

    log_level = (settings.log_level or "INFO").upper()
    # Allow LOG_LEVEL env override (e.g. debug/trace) used in tests
    env_level = os.getenv("LOG_LEVEL", "").upper()
    if env_level:
        log_level = env_level

    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True,
    )

    log_path = None
    if settings.log_to_file:
        log_path = _resolve_log_path(settings.log_path)
        try:
            logger.add(
                str(log_path),
                format=_FILE_FORMAT,
                level="DEBUG",
                rotation="20 MB",
                retention="14 days",
                compression="zip",
            )
        except PermissionError:
            # Fall back to a temp directory that is always writable
            log_path = Path(tempfile.gettempdir()) / "swaps_logs" / log_path.name
            log_path.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                str(log_path),
                format=_FILE_FORMAT,
                level="DEBUG",
                rotation="20 MB",
                retention="14 days",
                compression="zip",
            )

    root_logger = logging.getLogger()
    root_logger.handlers = [LoguruHandler()]
    root_logger.setLevel(logging.INFO)

    logger.info("Logging initialized - Level: {}, File: {}", log_level, log_path)
    return logger


# Initialize log AFTER defining all helper functions
_log = None


def _get_log():
    """Get or initialize the logger."""
    global _log
    if _log is None:
        try:
            _log = setup_logging()
        except Exception:
            # Fallback: bare loguru logger if setup fails
            _log = logger
    return _log


log = _get_log()
