"""Centralized logging configuration for create-roblox-ts.

Console output goes to stderr so it never mixes with step progress on
stdout. An optional rotating file handler records the full debug stream,
in either plain text or structured JSON.
"""

import json
import logging
import logging.config
import logging.handlers
from datetime import UTC, datetime
from pathlib import Path

LOGGER_NAME = "create_roblox_ts"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Produces one JSON object per record, including timing extras attached
    by the step sequencer.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON string representation of the log entry.
        """
        log_entry: dict = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        extra_fields = ["duration_ms", "operation", "command", "exit_code"]
        for field in extra_fields:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def setup_logging(
    level: str = "WARNING",
    quiet: bool = False,
    verbose: bool = False,
    log_file: Path | None = None,
    log_format: str = "text",
    rotation_count: int = 3,
    max_bytes: int = 10485760,
) -> "logging.Logger":
    """Setup global logging configuration.

    Args:
        level: Base console log level.
        quiet: Only ERROR level reaches the console.
        verbose: Enable debug-level console output.
        log_file: Optional log file; enables a rotating file handler.
        log_format: File output format ("text" or "json").
        rotation_count: Number of backup files.
        max_bytes: Max file size before rotation.

    Returns:
        Configured package logger.
    """
    if quiet:
        effective_level = "ERROR"
    elif verbose:
        effective_level = "DEBUG"
    else:
        effective_level = level

    config: dict = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {"format": "%(levelname)s | %(message)s"},
            "json": {
                "()": JSONFormatter,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "level": effective_level,
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            LOGGER_NAME: {"handlers": ["console"], "level": "DEBUG", "propagate": False}
        },
    }

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "json" if log_format == "json" else "detailed",
            "level": "DEBUG",
            "filename": str(log_file),
            "maxBytes": max_bytes,
            "backupCount": rotation_count,
        }
        config["loggers"][LOGGER_NAME]["handlers"].append("file")

    logging.config.dictConfig(config)
    return logging.getLogger(LOGGER_NAME)


def get_logger() -> "logging.Logger":
    """Get the package logger instance."""
    return logging.getLogger(LOGGER_NAME)
