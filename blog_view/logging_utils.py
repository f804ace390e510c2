"""
Logging for the home page build.

Console output goes through rich; when file logging is enabled the build
also writes one JSON object per event next to the rendered page, so a
build directory carries its own record of what was rendered.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.logging import RichHandler

from .config import LoggingConfig


LOGGER_NAME = "blog_view"

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


def setup_logging(cfg: LoggingConfig, output_dir: Path | None) -> logging.Logger:
    """Configure the ``blog_view`` logger for one build.

    Handlers from a previous build are replaced. The file log is only
    written when ``cfg.file`` is set and the build has an output directory.
    """
    level = logging.getLevelName(cfg.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handlers: list[logging.Handler] = []
    if cfg.console:
        handlers.append(_console_handler())
    if cfg.file and output_dir is not None:
        handlers.append(_build_log_handler(output_dir / cfg.filename, cfg.format))

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def log_event(logger: logging.Logger | None, message: str, **fields: Any) -> None:
    """Log a build event; ``fields`` become keys of the JSONL record."""
    if logger is not None:
        logger.info(message, extra=fields)


class BuildEventFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, message, then event fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS
        )
        return json.dumps(payload, ensure_ascii=False, default=str)


def _console_handler() -> logging.Handler:
    handler = RichHandler(rich_tracebacks=True, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _build_log_handler(path: Path, fmt: str) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    if fmt == "jsonl":
        handler.setFormatter(BuildEventFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    return handler
