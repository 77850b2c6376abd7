"""Logging configuration utilities.

The fetchers only ever log; whoever embeds them (the CLI, the page loader)
decides where the records go by calling :func:`configure_logging` once.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Literal, Optional

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_OUTPUT = os.environ.get("LOG_OUTPUT", "console").lower()
LOG_FILE_PATH = os.environ.get("LOG_FILE_PATH", "logs/portfolio-feeds.log")
LOG_FORMAT = os.environ.get("LOG_FORMAT", "text").lower()

LogOutput = Literal["console", "file", "both"]
LogFormat = Literal["text", "json"]

_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
_JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", '
    '"file": "%(filename)s:%(lineno)d", "message": "%(message)s"}'
)


def configure_logging(
    level: str | int | None = None,
    output: LogOutput | None = None,
    file_path: str | None = None,
    log_format: LogFormat | None = None,
    module: Optional[str] = None,
) -> None:
    """Configure application logging.

    Parameters
    ----------
    level:
        Logging level as a string (e.g., "INFO") or numeric value.
    output:
        Logging output destination: "console" (stderr), "file", or "both".
    file_path:
        Path to the log file if output is "file" or "both".
    log_format:
        Logging format: "text" or "json".
    module:
        Optional logger name to set the level on as well as the root logger.
    """
    # Resolved at call-time so variables loaded from .env are respected
    if level is None:
        level = os.environ.get("LOG_LEVEL", LOG_LEVEL).upper()
    if log_format is None:
        log_format = (os.environ.get("LOG_FORMAT") or LOG_FORMAT).lower()
    if output is None:
        output = (os.environ.get("LOG_OUTPUT") or LOG_OUTPUT).lower()
    if file_path is None:
        file_path = os.environ.get("LOG_FILE_PATH") or LOG_FILE_PATH

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(_TEXT_FORMAT if log_format == "text" else _JSON_FORMAT)

    if output in ("console", "both"):
        # stdout is reserved for the CLI output
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    if output in ("file", "both"):
        log_dir = os.path.dirname(file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(file_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if module:
        logging.getLogger(module).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
