"""
Structured logging.

Every record is written to stdout as a single JSON object carrying the
timestamp, level, logger name and any keyword fields passed by the caller.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from taskmanagement.config import LOG_LEVEL


class StructuredLogger:
    """Thin wrapper over a stdlib logger that emits JSON lines."""

    def __init__(self, name: str, level: int | str = LOG_LEVEL):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        # Root handlers would prepend their own text format
        self.logger.propagate = False

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)

    def _emit(self, level: int, message: str, fields: dict):
        if not self.logger.isEnabledFor(level):
            return
        record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "message": message,
            "service": self.logger.name,
        }
        record.update(fields)
        self.logger.log(level, json.dumps(record, default=str))

    def debug(self, message: str, **fields):
        self._emit(logging.DEBUG, message, fields)

    def info(self, message: str, **fields):
        self._emit(logging.INFO, message, fields)

    def warning(self, message: str, **fields):
        self._emit(logging.WARNING, message, fields)

    def error(self, message: str, **fields):
        self._emit(logging.ERROR, message, fields)


def get_logger(name: str) -> StructuredLogger:
    """Return a structured logger, usually for ``__name__``."""
    return StructuredLogger(name)
