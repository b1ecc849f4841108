"""
Logging Configuration for Last Call Store Finder
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
NOISY_LOGGERS = ('google_genai', 'httpx', 'httpcore')


def setup_logging(
    level=logging.INFO,
    log_file="last_call.log",
    log_dir="logs",
    max_bytes=10485760,  # 10MB
    backup_count=5
):
    """
    Configure logging for a standalone run

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Name of log file
        log_dir: Directory for log files, or None for console only
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured root logger
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    handlers = [logging.StreamHandler(sys.stdout)]

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        ))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        root_logger.addHandler(handler)

    return root_logger


def get_logger(name):
    """
    Get logger for specific module

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def setup_console_logging(level=logging.WARNING):
    """
    Configure console-only logging for an embedding UI host
    Reduces noise from the HTTP stack and the Gemini SDK
    """
    root_logger = setup_logging(level=level, log_dir=None)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger
