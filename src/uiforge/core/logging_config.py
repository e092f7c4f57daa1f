"""
Structured Logging
structlog on top of stdlib logging, console or JSON output.
"""

import logging
import sys

import structlog
from pythonjsonlogger import jsonlogger


# Noisy third-party loggers held at WARNING regardless of the app level
QUIET_LOGGERS = ("uvicorn.access", "httpx")

_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _root_handler(json_logs: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        # Event keys arrive as record extras and become top-level JSON fields
        handler.setFormatter(jsonlogger.JsonFormatter("%(levelname)s %(name)s %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Route every logger through one stdout handler.

    Args:
        level: Log level name; unknown names fall back to INFO
        json_logs: Emit one JSON object per line instead of console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.handlers[:] = [_root_handler(json_logs)]
    root.setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    renderer = structlog.stdlib.render_to_log_kwargs if json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[*_PROCESSORS, renderer],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger for a module; pass ``__name__``."""
    return structlog.get_logger(name)


# Binds request-scoped keys (e.g. request_id) for every log line in a block
bound_context = structlog.contextvars.bound_contextvars
