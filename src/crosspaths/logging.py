"""Logging setup for the crosspaths command line.

The library modules only create loggers; handlers are installed by
:func:`setup_logging`, which the CLI calls once configuration is loaded.
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

# format name -> (record format, date format)
_TEXT_FORMATS: Dict[str, Tuple[str, Optional[str]]] = {
    "simple": ("%(levelname)-8s | %(name)s | %(message)s", None),
    "detailed": (
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        "%Y-%m-%d %H:%M:%S",
    ),
}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, including fields set by LogContext."""

    def format(self, record: logging.LogRecord) -> str:
        data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        data.update(getattr(record, "extra_fields", {}))
        return json.dumps(data)


def make_formatter(format: str) -> logging.Formatter:
    """Return the formatter for a format name (simple, detailed, json)."""
    if format == "json":
        return StructuredFormatter()
    fmt, datefmt = _TEXT_FORMATS.get(format, _TEXT_FORMATS["simple"])
    return logging.Formatter(fmt=fmt, datefmt=datefmt)


def setup_logging(
    level: str = "WARNING",
    format: str = "simple",
    log_file: Optional[Path] = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """Configure the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Console format (simple, detailed, json)
        log_file: Optional log file, always written as JSON
        max_file_size_mb: Max log file size in MB before rotating
        backup_count: Number of rotated files to keep
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    # stderr, so command results on stdout stay machine-readable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(make_formatter(format))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
        )
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)


class LogContext:
    """Attach structured fields to every record created inside the block."""

    def __init__(self, logger: logging.Logger, **fields: Any) -> None:
        self.logger = logger
        self.fields = fields
        self._previous_factory = None

    def __enter__(self) -> "LogContext":
        previous = logging.getLogRecordFactory()
        self._previous_factory = previous
        fields = self.fields

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = previous(*args, **kwargs)
            extra = getattr(record, "extra_fields", {})
            record.extra_fields = {**extra, **fields}
            return record

        logging.setLogRecordFactory(record_factory)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        logging.setLogRecordFactory(self._previous_factory)
