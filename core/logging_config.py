"""
Logging configuration with rotation and structured JSON logging.

This module sets up logging for the application with:
- Console output (human-readable)
- File output (JSON structured, with rotation)
- Error file (JSON, only errors, with rotation)
- Suppression of noisy third-party loggers
"""

import logging
import logging.handlers
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from core.config import settings


# Extra attributes copied into the JSON payload when present on a record
EXTRA_FIELDS = ("appointment_id", "patient_name", "dentist", "duration")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record):
        """
        Format log record as JSON.

        Args:
            record: LogRecord instance

        Returns:
            JSON string with log data
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(log_dir: Optional[Path] = None, log_level: Optional[str] = None):
    """
    Setup application logging with multiple handlers.

    Creates:
    - Console handler with INFO level (human-readable format)
    - File handler with DEBUG level (JSON format, rotating)
    - Error file handler with ERROR level (JSON format, rotating)

    Suppresses noisy third-party loggers (sqlalchemy, aiosqlite, asyncio).

    Args:
        log_dir: Directory for log files (defaults to settings.log_dir)
        log_level: Root level name (defaults to settings.log_level)
    """
    log_dir = Path(log_dir or settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    level_name = (log_level or settings.log_level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name))

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # === Console Handler (human-readable) ===
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    # === File Handler (JSON, with rotation) ===
    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / "dental_appointments.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(file_handler)

    # === Error File Handler (JSON, with rotation) ===
    error_handler = logging.handlers.RotatingFileHandler(
        log_dir / "errors.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(error_handler)

    # === Suppress noisy loggers ===
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.info("Logging configured successfully")
    logging.info(f"Log level: {level_name}")
    logging.info(f"Log directory: {log_dir.absolute()}")
