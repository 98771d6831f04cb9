"""Structured JSON logging configuration for the room schedule library."""

import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from typing import Optional
from pathlib import Path

from .config import ScheduleSettings, get_settings


PACKAGE_LOGGER = "room_schedule"

# Attributes every LogRecord carries; anything else came in through `extra`.
_RESERVED_ATTRS = frozenset([
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'message', 'exc_info',
    'exc_text', 'stack_info', 'taskName'
])


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def __init__(self, service_name: str = "room-schedule"):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.module:
            log_entry["module"] = record.module
        if record.funcName and record.funcName != '<module>':
            log_entry["function"] = record.funcName
        if record.lineno:
            log_entry["line"] = record.lineno

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info)
            }

        extra_fields = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class LoggingConfig:
    """Logging configuration for the package logger."""

    def __init__(self,
                 log_level: str = "INFO",
                 service_name: str = "room-schedule",
                 log_dir: Optional[str] = None,
                 max_file_size: int = 10 * 1024 * 1024,  # 10MB
                 backup_count: int = 5,
                 enable_console: bool = True,
                 enable_file: bool = False):
        """
        Initialize logging configuration.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            service_name: Service name for log entries
            log_dir: Directory for log files (defaults to ./logs)
            max_file_size: Maximum size per log file in bytes
            backup_count: Number of backup log files to keep
            enable_console: Whether to enable console logging
            enable_file: Whether to enable file logging
        """
        self.log_level = getattr(logging, log_level.upper())
        self.service_name = service_name
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.enable_console = enable_console
        self.enable_file = enable_file
        self.log_dir = Path(log_dir) if log_dir else Path.cwd() / "logs"

        if self.enable_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    def setup_logging(self) -> logging.Logger:
        """Attach JSON handlers to the package logger and return it.

        Only the package logger is touched; the host application's root
        logger configuration is left alone.
        """
        logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

        logger.setLevel(self.log_level)
        json_formatter = JSONFormatter(service_name=self.service_name)

        if self.enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.log_level)
            console_handler.setFormatter(json_formatter)
            logger.addHandler(console_handler)

        if self.enable_file:
            file_handler = logging.handlers.RotatingFileHandler(
                filename=self.log_dir / f"{self.service_name}.log",
                maxBytes=self.max_file_size,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(self.log_level)
            file_handler.setFormatter(json_formatter)
            logger.addHandler(file_handler)

            # Separate file for ERROR and CRITICAL
            error_handler = logging.handlers.RotatingFileHandler(
                filename=self.log_dir / f"{self.service_name}-errors.log",
                maxBytes=self.max_file_size,
                backupCount=self.backup_count,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(json_formatter)
            logger.addHandler(error_handler)

        return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)


def setup_logging_from_settings(settings: Optional[ScheduleSettings] = None) -> LoggingConfig:
    """Setup logging from schedule settings (environment and .env)."""
    settings = settings or get_settings()
    config = LoggingConfig(
        log_level=settings.log_level,
        service_name=settings.service_name,
        log_dir=settings.log_dir,
        enable_console=settings.log_enable_console,
        enable_file=settings.log_enable_file
    )

    config.setup_logging()
    return config


def log_with_extra(logger: logging.Logger, level: int, message: str, **extra) -> None:
    """Log a message with extra fields."""
    logger.log(level, message, extra=extra)


def log_slot_violation(logger: logging.Logger, error: Exception, **extra) -> None:
    """Log a rejected slot construction or mutation."""
    log_with_extra(
        logger,
        logging.WARNING,
        f"Slot rule violation: {type(error).__name__} - {error}",
        violation_type=type(error).__name__,
        violation_details=str(error),
        **extra
    )
