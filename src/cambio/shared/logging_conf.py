# src/cambio/shared/logging_conf.py
"""
Logging Configuration - Root Logger Setup

Modules only create loggers with logging.getLogger(__name__). This module
installs the handlers once, from the composition root: stdout, a rotating
log file, or both. requests' transport logger (urllib3) is held at WARNING
so a fan-out refresh does not print one connection line per currency.

Files that USE this module:
- cambio.app (setup_logging, driven by Settings)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("urllib3",)


def _resolve_level(level: Union[int, str]) -> int:
    """Accept logging.INFO as well as "info"/"INFO"."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _rotating_file_handler(path: Path, max_bytes: int, backup_count: int) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_stdout: bool = True,
) -> List[logging.Handler]:
    """
    Replace the root logger's handlers.

    Args:
        level: Level number or name (default: logging.INFO)
        log_file: Optional path of a rotating log file
        max_bytes: Size per log file before rotation (default: 10MB)
        backup_count: Rotated files to keep (default: 5)
        log_stdout: Also log to stdout. Ignored when there is no log file,
            since the root logger always gets at least one handler.

    Returns:
        The installed handlers

    Raises:
        ValueError: If level is an unknown name
    """
    numeric_level = _resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    handlers: List[logging.Handler] = []
    if log_stdout or not log_file:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        handlers.append(_rotating_file_handler(Path(log_file), max_bytes, backup_count))
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=numeric_level, handlers=handlers, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured: level=%s, stdout=%s, file=%s",
        logging.getLevelName(numeric_level), log_stdout or not log_file, log_file,
    )
    return handlers
