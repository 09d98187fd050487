"""
Logging setup.

Every record carries the request's correlation id (set by
CorrelationIdMiddleware). Only the chattask package logs below WARNING.
"""

import io
import logging
import sys
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from chattask.config.settings import Config

NO_CORRELATION_ID = "NO Correlation ID"

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default=NO_CORRELATION_ID)

# Third-party loggers that are chatty at INFO/DEBUG
NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "aiokafka", "httpx", "httpcore")


class CorrelationIdFilter(logging.Filter):
    """Copy the current correlation id onto the record."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter for records that bypassed the filter (e.g. emitted before setup)."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def _add_handler(root: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(SafeFormatter(Config.LOG_FORMAT))
    handler.addFilter(CorrelationIdFilter())
    root.addHandler(handler)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    app_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(logging.WARNING)

    # The app factory may run several times in one process (tests)
    if not getattr(root, "_chattask_configured", False):
        _add_handler(
            root,
            logging.StreamHandler(
                io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", line_buffering=True)
            ),
        )
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            _add_handler(
                root,
                RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5),
            )
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
        root._chattask_configured = True

    logging.getLogger("chattask").setLevel(app_level)
    logging.getLogger("chattask").info(f"Logging is set up (level={level}, file={log_file or '-'})")
    return root
