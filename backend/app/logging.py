"""Logging configuration for the rental portfolio backend."""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


def setup_logging(level: str | None = None, format_type: str | None = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str, optional
        Log level name. Defaults to the ``LOG_LEVEL`` env var, then INFO.
    format_type : str, optional
        "standard" or "json". Defaults to the ``LOG_FORMAT`` env var.
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    format_type = format_type or os.getenv("LOG_FORMAT", "standard")
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("app").setLevel(log_level)
    # SQL echo is far too chatty at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
