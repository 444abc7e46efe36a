"""Logging configuration with console and rotating file handlers"""
import glob
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import get_settings


def setup_logging(log_file: Optional[str] = None, console_level: Optional[int] = None, file_level: int = logging.DEBUG):
    """
    Configure logging for an indexing run:
    - Console: processor registration and configuration problems
    - File: per-field tokenizing detail (DEBUG) with rotation

    Rotation policy:
    - New log file per indexing session (timestamp-based naming)
    - Keep last 5 session logs (older ones removed on startup)
    - Auto-rotate when a file reaches 10MB

    Args:
        log_file: Base path to log file, defaults to SEARCH_PROCESSORS_LOG_FILE
        console_level: Console logging level, defaults to SEARCH_PROCESSORS_LOG_LEVEL
        file_level: File logging level (DEBUG = verbose)
    """
    settings = get_settings()
    log_path = Path(log_file or settings.log_file)
    if console_level is None:
        console_level = settings.log_level
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Keep only the newest 4 previous sessions, this one makes 5
    log_pattern = str(log_path.parent / f"{log_path.stem}_*.log")
    existing_logs = sorted(glob.glob(log_pattern), reverse=True)
    for old_log in existing_logs[4:]:
        try:
            Path(old_log).unlink()
        except OSError as e:
            print(f"Could not remove old log file {old_log}: {e}", file=sys.stderr)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Filter in handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=10*1024*1024,  # 10MB
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
    return session_log
