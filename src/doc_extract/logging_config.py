"""Application logging configuration utilities."""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

AUDIT_LOGGER_NAME = "doc_extract.audit"
AUDIT_LOG_FILENAME = "extract_audit.log"


class MinimalJSONFormatter(logging.Formatter):
    """Serialize log records to a compact JSON string."""

    _RESERVED_KEYS = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - inherited
        timestamp = (
            datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z")
        )

        log_record: dict[str, Any] = {
            "ts": timestamp,
            "level": record.levelname,
            "module": record.name,
        }

        if isinstance(record.msg, dict):
            log_record.update(record.msg)
        else:
            message = record.getMessage()
            if message:
                log_record["message"] = message

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in self._RESERVED_KEYS or key.startswith("_"):
                continue
            log_record[key] = value

        return json.dumps(log_record, ensure_ascii=False, default=str)


def configure_logging(log_dir: str | Path = "logs", level: str = "INFO") -> None:
    """Configure JSON logging to stderr plus the per-request audit log file."""

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": MinimalJSONFormatter}},
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                },
                "extract_audit": {
                    "class": "logging.FileHandler",
                    "filename": str(log_path / AUDIT_LOG_FILENAME),
                    "mode": "a",
                    "encoding": "utf-8",
                    "formatter": "json",
                },
            },
            "root": {
                "level": level,
                "handlers": ["default"],
            },
            "loggers": {
                AUDIT_LOGGER_NAME: {
                    "level": "INFO",
                    "handlers": ["extract_audit"],
                    "propagate": False,
                }
            },
        }
    )
