"""Logging configuration.

Human-readable lines in development, one JSON object per line in production
so log aggregators can index the request ID.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from employee_api.config import Settings, get_settings

HANDLER_NAME = "employee_api"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


def configure_logging(settings: Settings | None = None) -> None:
    """Install a single stream handler on the root logger.

    Safe to call more than once; the previous handler is replaced.

    Args:
        settings: Settings to read the level and environment from
    """
    settings = settings or get_settings()

    handler = logging.StreamHandler(sys.stdout)
    if settings.environment == "production":
        handler.setFormatter(JSONFormatter(settings.app_name))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    handler.set_name(HANDLER_NAME)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(settings.log_level)

    # SQL statements carry record data; keep them out of the logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
