"""
fungi logging - structured logging for the library and its callers.

fungi logs very little: ``take`` reports how many draws it made and the
Either operators report when a chain short-circuits, all at DEBUG. This
module owns the structlog configuration those events flow through.

Manifesto:
    A utility library must stay quiet by default and still be debuggable
    when a pipeline misbehaves. Logging here:

    - **Stays quiet:** Library events are DEBUG only, and they go through
      stdlib loggers, so nothing is printed until someone adds a handler
    - **Structures:** Key/value events, JSON when not attached to a TTY
    - **Defers:** Applications that already configure structlog or stdlib
      logging need not call configure_logging() at all

Architecture:
    ::

        get_logger("fungi.iterable")
            │  structlog proxy wrapping logging.getLogger("fungi.iterable")
            ▼
        structlog processor chain (configure_logging):
          1. TimeStamper (iso)
          2. merge_contextvars
          3. add_log_level
          4. add_logger_name
          5. _add_service_metadata
          6. JSONRenderer (or ConsoleRenderer on a TTY)
            │
            ▼
        stdlib logging ── root handler installed by configure_logging ──> stdout

Examples:
    >>> from fungi.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=True)
    >>> logger = get_logger(__name__)
    >>> logger.debug("take.drained", count=3)

Tags:
    logging, structlog, observability, fungi

Doc-Types:
    - API Reference
    - Observability Guide
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from fungi.errors import ValidationError

if TYPE_CHECKING:
    from fungi.settings import FungiSettings


LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")

_SERVICE_NAME = "fungi"

# Root handler installed by configure_logging(), replaced on reconfiguration.
_HANDLER: logging.Handler | None = None


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value.

    Raises:
        ValidationError: level is not a standard logging level name
    """
    name = level.strip().upper()
    if name not in LEVEL_NAMES:
        raise ValidationError(
            f"unknown log level {level!r}; expected one of {', '.join(LEVEL_NAMES)}",
            context={"level": level},
        )
    return getattr(logging, name)


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "fungi",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs

    Raises:
        ValidationError: level is not a standard logging level name
    """
    global _SERVICE_NAME
    numeric_level = resolve_level(level)
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stdout.isatty()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    # Module-level loggers in fungi are created at import time, so they must
    # not be pinned to whatever configuration was active on first use.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    _install_handler(numeric_level)


def _install_handler(numeric_level: int) -> None:
    global _HANDLER
    root = logging.getLogger()
    if _HANDLER is not None:
        root.removeHandler(_HANDLER)
    _HANDLER = logging.StreamHandler(sys.stdout)
    _HANDLER.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_HANDLER)
    root.setLevel(numeric_level)


def reset_logging() -> None:
    """Undo configure_logging(): structlog defaults, no fungi handler, root at WARNING."""
    global _HANDLER, _SERVICE_NAME
    structlog.reset_defaults()
    root = logging.getLogger()
    if _HANDLER is not None:
        root.removeHandler(_HANDLER)
        _HANDLER = None
    root.setLevel(logging.WARNING)
    _SERVICE_NAME = "fungi"


def configure_from_settings(settings: FungiSettings | None = None) -> None:
    """Configure logging from ``FungiSettings`` (environment driven by default)."""
    if settings is None:
        from fungi.settings import FungiSettings

        settings = FungiSettings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.json_logs,
        service=settings.service_name,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger backed by the stdlib logger ``name``.

    The stdlib logger is wrapped directly rather than built by the
    configured factory, so an unconfigured process drops DEBUG events
    instead of printing them.

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog BoundLogger proxy
    """
    return structlog.wrap_logger(logging.getLogger(name))


__all__ = [
    "LEVEL_NAMES",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "reset_logging",
    "resolve_level",
]
