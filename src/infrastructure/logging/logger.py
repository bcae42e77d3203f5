"""Structured logging."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from src.config.constants import VerificationStep

_NOISY_LOGGERS = ("httpx", "httpcore", "openai")

# LogRecord attributes set through ``extra`` by StructuredLogger
_EVENT_FIELDS = ("step", "state", "duration_ms", "error_type")


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _EVENT_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)
        if record.exc_info:
            log_data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(
    level: str = "INFO",
    json_output: bool = True,
    silence_noisy_loggers: bool = True,
) -> None:
    """Configure the root logger once for the process."""
    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    if silence_noisy_loggers:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def _describe(state: dict[str, Any]) -> str:
    return " ".join(f"{key}={value}" for key, value in state.items())


class StructuredLogger:
    """Logs verification steps as records carrying step, state and timing.

    The message stays human readable ("parsing: source=direct ..."); the
    structured fields travel as record attributes for JSONFormatter.
    """

    def __init__(self, name: str = __name__):
        self.logger = logging.getLogger(name)

    def log_step(
        self,
        step: VerificationStep,
        state: dict[str, Any],
        duration_ms: float | None = None,
    ) -> None:
        extra: dict[str, Any] = {"step": step.value, "state": state}
        message = f"{step.value}: {_describe(state)}"
        if duration_ms is not None:
            extra["duration_ms"] = round(duration_ms, 2)
            message += f" ({extra['duration_ms']} ms)"
        self.logger.info(message, extra=extra)

    def log_error(
        self,
        step: VerificationStep,
        error: BaseException,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Log a failed step with the exception attached."""
        state = context or {}
        self.logger.error(
            f"{step.value} failed: {type(error).__name__}: {error}",
            exc_info=error,
            extra={"step": step.value, "state": state, "error_type": type(error).__name__},
        )
