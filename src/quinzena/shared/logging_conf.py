"""
Logging Configuration - Logging Setup for Host Applications

The engine itself only emits records through module-level loggers; a host
application calls setup_logging (or setup_logging_from_settings) once to
route them to stdout and/or a rotating log file.

Files that USE this module:
- Host applications embedding the engine (setup_logging / setup_logging_from_settings)
- tests.test_settings (logging setup tests)

Files that this module USES:
- quinzena.config (settings for log level, file and rotation)
"""
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Union
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "quinzena.log"
STDOUT_ENV = "QUINZENA_LOG_STDOUT"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _log_path(log_file, log_dir) -> Optional[Path]:
    # log_dir wins; the file inside it always has the package name
    if log_dir:
        return Path(log_dir) / LOG_FILE_NAME
    if log_file:
        return Path(log_file)
    return None


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    log_to_stdout: Optional[bool] = None,
) -> Optional[Path]:
    """
    Route the package's log records to stdout and/or a rotating file.

    Replaces any handlers already on the root logger. With neither stdout
    nor a file selected, records still go to stdout.

    Args:
        level: Level as int or name ("DEBUG")
        log_file: Path of the log file
        log_dir: Directory for quinzena.log (takes precedence over log_file)
        max_bytes: Size per file before rotation
        backup_count: Rotated files to keep
        log_to_stdout: Defaults to the QUINZENA_LOG_STDOUT env toggle (true)

    Returns:
        Path of the log file, or None when logging to stdout only
    """
    if log_to_stdout is None:
        log_to_stdout = os.environ.get(STDOUT_ENV, "true").lower() == "true"

    handlers: List[logging.Handler] = []
    path = _log_path(log_file, log_dir)
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        )
    if log_to_stdout or not handlers:
        handlers.insert(0, logging.StreamHandler(sys.stdout))

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=_resolve_level(level), handlers=handlers, force=True)
    logging.getLogger(__name__).info("Logging configured: file=%s, level=%s", path, level)
    return path


def setup_logging_from_settings(settings=None) -> Optional[Path]:
    """Configure logging from Settings (defaults to the global quinzena.config.settings)."""
    if settings is None:
        from quinzena.config import settings

    return setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )
