"""Logging setup for ideamock.

Every module logs through structlog with an event name plus keyword context
(mock_request, mock_service_created, mock_fixtures_loaded, ...). The facade
pipeline binds service, operation and scenario into contextvars, so any event
emitted while a fixture is being customized carries the call it belongs to.
Standard-library records are routed through the same renderer.
"""

import logging
import logging.config

import structlog


def configure_structlog(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Route mock request, fixture and factory events to stdout.

    Test suites and dev servers call this once before the first facade is
    built; loggers are cached on first use, so later calls do not reach them.

    Args:
        log_level: Root log level; DEBUG adds facade initialization and
            fixture loading events
        json_logs: JSON lines for CI log collection, console output otherwise
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    renderer,
                ],
                "foreign_pre_chain": shared_processors,
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["default"], "level": log_level},
    })

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings() -> None:
    """Configure logging from the cached Settings."""
    from ideamock.core.config import get_settings

    settings = get_settings()
    configure_structlog(log_level=settings.log_level, json_logs=settings.json_logs)
