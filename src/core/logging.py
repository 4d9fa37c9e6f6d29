"""Structured logging for suite runs, with step context and redaction."""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from pythonjsonlogger import jsonlogger

from .config import get_settings

REDACTED = "***REDACTED***"
LOG_FILE_NAME = "suite.log"


def _build_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return jsonlogger.JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    return logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def setup_logging(log_dir: Optional[Path] = None) -> Path:
    """
    Configure stdlib handlers and structlog for a test session.

    Output goes to stdout and to ``<log_dir>/suite.log``. With
    ``json_logs`` enabled both handlers emit one JSON object per line.
    Any ``step`` bound through structlog.contextvars is attached to every
    event logged inside it.

    Args:
        log_dir: Directory for the log file (defaults to ./logs)

    Returns:
        Path of the log file
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level, logging.INFO)

    log_dir = Path(log_dir or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    formatter = _build_formatter(settings.json_logs)
    handlers = [logging.StreamHandler(sys.stdout), logging.FileHandler(log_file)]
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = handlers

    # httpx logs every request at INFO
    for noisy in ("httpx", "httpcore", "asyncio"):
        logging.getLogger(noisy).setLevel(max(log_level, logging.WARNING))

    if settings.json_logs:
        renderer = structlog.stdlib.ProcessorFormatter.wrap_for_formatter
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            RedactSensitiveData(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return log_file


class RedactSensitiveData:
    """Processor that masks credentials before an event is rendered.

    Keys are matched case-insensitively by substring, so ``auth_token`` and
    a ``Cookie`` header are both caught. Nested dicts, lists and tuples are
    walked.
    """

    SENSITIVE_KEYS = (
        "password",
        "secret",
        "token",
        "cookie",
        "api_key",
        "authorization",
    )

    def __call__(self, logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        return self._redact(event_dict)

    def _is_sensitive(self, key: Any) -> bool:
        return isinstance(key, str) and any(s in key.lower() for s in self.SENSITIVE_KEYS)

    def _redact(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                key: REDACTED if self._is_sensitive(key) else self._redact(item)
                for key, item in value.items()
            }
        if isinstance(value, (list, tuple)):
            return type(value)(self._redact(item) for item in value)
        return value


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
