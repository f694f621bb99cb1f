"""Structured logging for checkstyle-issues."""
import logging
import json
import sys
from datetime import datetime, timezone
from typing import Optional
from contextvars import ContextVar

from .config import settings

# Context variable for the report currently being processed
report_ctx: ContextVar[Optional[str]] = ContextVar("report", default=None)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        report = report_ctx.get()
        if report:
            log_data["report"] = report

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, default=str)


class StructuredLogger:
    """Logger with structured data support."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, message: str, **kwargs):
        """Log with extra structured data."""
        extra = {"extra_data": kwargs} if kwargs else {}
        self.logger.log(level, message, extra=extra)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def log_report_parsed(
        self,
        source_name: str,
        file_count: int,
        excluded_files: int,
        issue_count: int,
        skipped_violations: int,
        duration_ms: float
    ):
        """Log a successfully converted report."""
        self.info(
            f"Parsed {issue_count} issue(s) from {source_name}",
            event="report_parsed",
            source=source_name,
            file_count=file_count,
            excluded_files=excluded_files,
            issue_count=issue_count,
            skipped_violations=skipped_violations,
            duration_ms=round(duration_ms, 2)
        )

    def log_report_failed(self, source_name: str, error: Exception):
        """Log a report that could not be parsed."""
        self.warning(
            f"Failed to parse {source_name}: {error}",
            event="report_failed",
            source=source_name,
            error_type=type(error).__name__
        )


def setup_logging(json_format: Optional[bool] = None):
    """
    Configure logging for the application.

    Args:
        json_format: If True, use JSON logging. If False, use a human-readable
                     format. Defaults to ``settings.LOG_JSON``.
    """
    if json_format is None:
        json_format = settings.LOG_JSON

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        ))

    root_logger.addHandler(handler)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name)
