"""structlog on top of stdlib logging, one stderr handler for everything."""

from __future__ import annotations

import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

import structlog

from catalogarr.infrastructure.config.schema import AppConfig

log = structlog.get_logger(__name__)

# Third-party loggers routed through our handler at the configured level.
_LIBRARY_LOGGERS = ("httpx", "httpcore")


def _stamp_foreign_record(
    _logger: Any, _method: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Use the LogRecord's creation time for records not emitted via structlog."""
    record = event_dict.get("_record")
    if isinstance(record, logging.LogRecord):
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        event_dict["timestamp"] = created.isoformat().replace("+00:00", "Z")
    return event_dict


def _common_processors() -> list[structlog.typing.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]


def _renderer(config: AppConfig) -> structlog.typing.Processor:
    if config.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def build_logging_config(config: AppConfig) -> dict[str, Any]:
    """Return the ``dictConfig`` mapping for *config*.

    A fresh mapping is built on every call; root and the library loggers all
    share the ``default`` handler and ``config.log_level``.
    """
    level = config.log_level
    formatter = {
        "()": structlog.stdlib.ProcessorFormatter,
        "foreign_pre_chain": [_stamp_foreign_record, *_common_processors()],
        "processors": [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(config),
        ],
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"structlog": formatter},
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "structlog",
            },
        },
        "loggers": {
            name: {"handlers": ["default"], "level": level, "propagate": False}
            for name in _LIBRARY_LOGGERS
        },
        "root": {"handlers": ["default"], "level": level},
    }


def configure_logging(config: AppConfig) -> dict[str, Any]:
    """Configure structlog and stdlib logging; returns the applied ``dictConfig``."""
    structlog.configure(
        processors=[
            *_common_processors(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    applied = build_logging_config(config)
    logging.config.dictConfig(applied)

    log.info("logging_configured", log_format=config.log_format, log_level=config.log_level)
    return applied
