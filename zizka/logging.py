"""JSON logging utilities for the invoice generator."""

from __future__ import annotations

import json
import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

LOGGER_NAME = "zizka"


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter adding an ISO timestamp and merging the event payload."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        event: dict[str, object] = getattr(record, "event", {})
        payload: dict[str, object] = {
            "ts": datetime.now(tz=UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if event:
            payload.update(event)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str, *, json_output: bool = True) -> logging.Logger:
    """Configure the ``zizka`` logger and return it."""
    logger = logging.getLogger(LOGGER_NAME)
    if any(handler.get_name() == LOGGER_NAME for handler in logger.handlers):
        logger.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(LOGGER_NAME)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


@contextmanager
def run_log_context(
    *,
    config_path: str,
    invoice_path: str,
) -> Iterator[dict[str, object]]:
    """Capture execution timing and write a single structured log entry per run.

    The yielded dict may be filled by the caller; its content is merged into
    the event.
    """

    logger = logging.getLogger(LOGGER_NAME)
    started = time.perf_counter()
    status = "ok"
    error_message: str | None = None
    result: dict[str, object] = {}
    try:
        yield result
    except Exception as exc:  # noqa: BLE001 - re-raise after logging
        status = "error"
        error_message = str(exc)
        raise
    finally:
        duration_ms = int((time.perf_counter() - started) * 1000)
        event: dict[str, object] = {
            "config": config_path,
            "invoice": invoice_path,
            "duration_ms": duration_ms,
            "status": status,
        }
        if result:
            event.update(result)
        if error_message:
            event["error"] = error_message
            logger.error("invoice.run", extra={"event": event})
        else:
            logger.info("invoice.run", extra={"event": event})
