"""Logging setup driven by ``ObservabilityConfig``.

Modules log through ``logging.getLogger(__name__)`` and pass context with
``extra={...}``. The JSON formatter keeps that context as fields.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

_HANDLER_NAME = "artasia_atlas"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, ``extra`` fields included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again replaces the handler installed by a previous call.

    Returns:
        The ``artasia_atlas`` logger.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="ATLAS_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    logger = logging.getLogger("artasia_atlas")

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
