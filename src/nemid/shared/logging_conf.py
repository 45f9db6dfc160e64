# src/nemid/shared/logging_conf.py
"""
Logging Configuration - Logging Setup for the CLI

This module configures logging for programs built on nemid. The library
itself only creates module loggers; handlers are installed here, once, by
the entry point. Console records go to stderr by default so that a
command's result on stdout stays clean for pipes.

Files that USE this module:
- nemid.app (setup_logging for logging initialization)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "nemid.log"


def _resolve_log_file(
    log_file: Optional[Union[str, Path]],
    log_dir: Optional[Union[str, Path]],
) -> Optional[Path]:
    """Pick the log file path; log_dir wins over log_file. Creates parent dirs."""
    if log_dir:
        path = Path(log_dir) / LOG_FILE_NAME
    elif log_file:
        path = Path(log_file)
    else:
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_to_console: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure application-wide logging settings.

    Output goes to the console, to a rotating file, or both. When neither
    is requested the console is used anyway.

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files; the file is named nemid.log
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)
        log_to_console: Whether to log to the console stream (default: True)
        stream: Console stream (default: sys.stderr at call time)
    """
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    console_stream = stream if stream is not None else sys.stderr
    log_file_path = _resolve_log_file(log_file, log_dir)
    handlers: List[logging.Handler] = []

    if log_file_path is not None:
        handlers.append(
            RotatingFileHandler(
                log_file_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )

    if log_to_console or not handlers:
        handlers.append(logging.StreamHandler(console_stream))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    logging.getLogger(__name__).debug(
        "Logging configured: file=%s, console=%s, level=%s",
        log_file_path,
        log_to_console,
        level,
    )
