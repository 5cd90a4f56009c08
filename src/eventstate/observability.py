"""Logging setup for eventstate.

Configures structlog (structured logging, JSON output by default) on top of the stdlib
logging module. Call `configure_logging()` once from the host's startup code, never at import time.
"""

import logging.config
import typing as t

import structlog

from eventstate import settings


def add_app_context(logger: t.Any, method_name: str, event_dict: dict[str, t.Any]) -> dict[str, t.Any]:
    """Add application-level context to all log events."""
    event_dict["service"] = settings.SERVICE_NAME
    event_dict["environment"] = settings.DEPLOYMENT_ENVIRONMENT
    return event_dict


# Processors for foreign loggers (plain `logging` calls from the host and libraries)
FOREIGN_PRE_CHAIN: list[t.Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    add_app_context,
]


def _renderer(json_output: bool) -> t.Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def build_processors() -> list[t.Any]:
    """Return the structlog processor chain.

    Rendering happens in the stdlib formatter, so structlog and plain `logging` records share one output.
    """
    return [
        structlog.contextvars.merge_contextvars,  # Merge context variables
        structlog.stdlib.add_logger_name,  # Add logger name
        structlog.stdlib.add_log_level,  # Add log level
        structlog.stdlib.PositionalArgumentsFormatter(),  # Format positional args
        structlog.processors.TimeStamper(fmt="iso"),  # Add ISO timestamp
        structlog.processors.StackInfoRenderer(),  # Render stack info
        structlog.processors.format_exc_info,  # Format exceptions
        structlog.processors.UnicodeDecoder(),  # Decode unicode
        add_app_context,  # Add service/environment
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,  # Hand over to the formatter
    ]


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Root log level name, defaults to settings.LOG_LEVEL
        json_output: Render JSON instead of console output, defaults to settings.LOG_JSON
    """
    level = (level or settings.LOG_LEVEL).upper()
    if json_output is None:
        json_output = settings.LOG_JSON

    structlog.configure(
        processors=build_processors(),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(json_output),
                    ],
                    "foreign_pre_chain": FOREIGN_PRE_CHAIN,
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "structured",
                },
            },
            "root": {
                "handlers": ["console"],
                "level": level,
            },
        }
    )
