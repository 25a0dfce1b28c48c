"""Structured logging for vocab_srs.

Console output in development, JSON lines in production. While a review
is being recorded the learner and word are bound as context variables,
so every line emitted on its behalf (storage conflicts included) can be
traced back to it.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog

from vocab_srs.config import LoggingSettings

__all__ = [
    "configure_logging",
    "get_logger",
    "review_context",
]

_DRIVER_LOGGERS = ("motor", "pymongo")


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Log settings (default: loaded from VOCAB_SRS_LOG_* variables)
    """
    settings = settings or LoggingSettings()
    levels = logging.getLevelNamesMapping()
    level = levels[settings.level]

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    for name in _DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(max(level, levels[settings.driver_level]))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, usually with ``__name__``."""
    return structlog.get_logger(name)


@contextmanager
def review_context(user_id: str, word_id: str) -> Iterator[None]:
    """Bind the learner and word to all log lines emitted in the block."""
    with structlog.contextvars.bound_contextvars(user_id=user_id, word_id=word_id):
        yield


_configured = False


def _ensure_configured() -> None:
    global _configured
    if not _configured:
        configure_logging()
        _configured = True


_ensure_configured()
