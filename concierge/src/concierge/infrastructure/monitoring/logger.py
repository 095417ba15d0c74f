"""
Logging setup for Concierge.

Plain-text lines in development, one JSON object per line in production.
Every record emitted while a request is being handled carries its
X-Request-ID.
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any, Optional, Union
from uuid import uuid4

# X-Request-ID of the request being handled in this context
request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Loggers that are too chatty below WARNING
_QUIET_LOGGERS = ("asyncio", "sqlalchemy.engine", "sqlalchemy.pool")


class JSONFormatter(logging.Formatter):
    """
    Render a record as a single JSON line.

    Fields passed through ``extra=`` (e.g. ``step`` on shutdown logs) are
    copied to the top level next to the fixed fields.
    """

    def __init__(self, service: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.service:
            entry["service"] = self.service

        request_id = request_id_ctx.get()
        if request_id:
            entry["request_id"] = request_id

        entry.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        )

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry["file"] = record.pathname
        entry["line"] = record.lineno
        entry["function"] = record.funcName

        return json.dumps(entry, default=str)


def setup_logging(
    level: Union[str, int] = "INFO",
    json_logs: bool = True,
    service: Optional[str] = None,
) -> None:
    """
    Install a single stdout handler on the root logger.

    uvicorn runs with ``log_config=None``, so its loggers propagate here
    and share the same format.

    Args:
        level: Level name (DEBUG, INFO, ...) or number
        json_logs: JSON lines (True) or plain text (False)
        service: Service name added to every JSON line
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    if json_logs:
        formatter: logging.Formatter = JSONFormatter(
            service=service, datefmt="%Y-%m-%dT%H:%M:%S"
        )
    else:
        formatter = logging.Formatter(_TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # Access lines duplicate the metrics middleware outside production
    if not json_logs:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass __name__)."""
    return logging.getLogger(name)


def set_request_id(request_id: Optional[str] = None) -> str:
    """
    Bind a request ID to the current context.

    Args:
        request_id: Incoming X-Request-ID, or None to generate one

    Returns:
        The ID now bound
    """
    bound = request_id or uuid4().hex
    request_id_ctx.set(bound)
    return bound


def get_request_id() -> Optional[str]:
    return request_id_ctx.get()
