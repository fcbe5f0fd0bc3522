"""Logging configuration and utilities."""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# Same layout as Go's standard log package: "2024/01/31 12:00:00 message"
LOG_FORMAT = '%(asctime)s %(message)s'
DATE_FORMAT = '%Y/%m/%d %H:%M:%S'

ROOT_LOGGER = "funcutil"

class StderrHandler(logging.StreamHandler):
    """Stream handler that writes to whatever ``sys.stderr`` is at emit time."""

    def __init__(self, level=logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr

def get_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None,
    fmt: str = LOG_FORMAT
) -> logging.Logger:
    """Get configured logger instance.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        fmt: Record format for the console handler

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Don't add handlers if they already exist
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper()))

    # Console handler
    console_handler = StderrHandler()
    console_handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    # File handler (optional)
    if log_file:
        _add_file_handler(logger, log_file)

    return logger

def _add_file_handler(logger: logging.Logger, log_file: str) -> None:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_format = logging.Formatter(
        '%(asctime)s %(name)s %(levelname)s %(filename)s:%(lineno)d %(message)s',
        datefmt=DATE_FORMAT
    )
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)

def configure_logging(config: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """Apply the ``logging`` section of a config dict to the package loggers.

    Args:
        config: Full configuration dictionary (as returned by ``load_config``)

    Returns:
        The package root logger
    """
    section = (config or {}).get('logging') or {}
    level = str(section.get('level', 'INFO')).upper()
    fmt = section.get('format') or LOG_FORMAT
    log_file = section.get('log_file')

    root = get_logger(ROOT_LOGGER, level=level, fmt=fmt)
    root.setLevel(getattr(logging, level))

    for handler in root.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))

    if log_file and not any(isinstance(h, logging.FileHandler) for h in root.handlers):
        _add_file_handler(root, log_file)

    return root
