"""Logging pipeline for controller traces.

Controller, session, keyboard and host loggers pass their trace fields
(``controller_type``, ``event``, ``button``, ``key_code`` ...) through
``extra=``. Both formatters here surface those fields: the JSON formatter
nests them under ``"input"``, the text formatter appends ``key=value`` pairs
after the message.
"""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from controlpad.api.logging import LoggingConfig
from controlpad.runtime.config import load_runtime_config

_QUEUE_LISTENER: QueueListener | None = None

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))) | {
    "message",
    "asctime",
}

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def input_fields(record: logging.LogRecord) -> dict[str, object]:
    """Return the trace fields attached to record via ``extra=``."""
    return {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, trace fields under ``"input"``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = input_fields(record)
        if fields:
            payload["input"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


class TextFormatter(logging.Formatter):
    """Plain console line followed by ``key=value`` trace fields."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = input_fields(record)
        if not fields:
            return line
        pairs = " ".join(f"{key}={value!r}" for key, value in fields.items())
        return f"{line} {pairs}"


def configure_logging(config: LoggingConfig) -> None:
    """Install console logging, plus a queued file sink when a path is set."""
    shutdown_logging()

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.console_format))
    if not config.file_path:
        root.addHandler(console)
        return

    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    file_sink = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    file_sink.setFormatter(_formatter(config.file_format))

    global _QUEUE_LISTENER
    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _QUEUE_LISTENER = QueueListener(records, console, file_sink, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def setup_logging() -> bool:
    """Configure logging from ``CONTROLPAD_*`` env unless the app already did.

    Returns True when handlers were installed.
    """
    if logging.getLogger().handlers:
        return False
    runtime_config = load_runtime_config()
    configure_logging(
        LoggingConfig(
            level_name=runtime_config.log_level,
            console_format=runtime_config.log_format,
            file_path=runtime_config.log_file,
        )
    )
    return True


def shutdown_logging() -> None:
    """Flush and stop the file sink listener if one is running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None


def _formatter(kind: str) -> logging.Formatter:
    return JsonFormatter() if kind.strip().lower() == "json" else TextFormatter()
