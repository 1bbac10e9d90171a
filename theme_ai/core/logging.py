"""Structured logging configuration: structlog rendered by stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

DEFAULT_LOG_LEVEL = "WARNING"


def _resolve_level(name: str) -> str:
    """Upper-cased level name, or ``DEFAULT_LOG_LEVEL`` if logging does not know it."""
    name = name.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and stdlib logging.

    Reads from environment variables:
        THEME_AI_LOG_LEVEL:  log level (default: WARNING, also used when
                             the value is not a known level name)
        THEME_AI_LOG_FORMAT: console | json (default: console)

    An explicit *level* (e.g. from ``--verbose``) wins over the environment.
    Logs go to stderr so that stdout carries only the report, which keeps
    ``--json`` output parseable.
    """
    log_level = _resolve_level(level or os.environ.get("THEME_AI_LOG_LEVEL", DEFAULT_LOG_LEVEL))
    log_format = os.environ.get("THEME_AI_LOG_FORMAT", "console").lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    # --- structlog configure ---
    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # --- stdlib logging configure ---
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "structlog",
                },
            },
            "root": {
                "handlers": ["default"],
                "level": log_level,
            },
            "loggers": {
                "theme_ai": {"level": log_level},
                "httpx": {"level": "WARNING"},
                "httpcore": {"level": "WARNING"},
                "LiteLLM": {"level": "WARNING"},
            },
        }
    )
