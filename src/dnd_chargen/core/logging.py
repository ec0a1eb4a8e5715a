"""Structured logging for the character-creation engine.

Every module logs through structlog with ``get_logger(__name__)``. Nothing
is configured on import. A host application calls ``configure_logging``
once, either with explicit options or with none to read them from
``Settings``.

Validation of a whole character runs inside ``character_context`` so that
every step entry carries the character's name.

Example:
    >>> from dnd_chargen.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> get_logger(__name__).debug("Step validated", step="race", errors=0)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog


if TYPE_CHECKING:
    from structlog.types import EventDict, Processor, WrappedLogger


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _add_package(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    event_dict.setdefault("package", "dnd_chargen")
    return event_dict


def _renderer(json_format: bool) -> Processor:
    if json_format:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(
    level: str | None = None,
    *,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Level name. Defaults to ``Settings.log_level``.
        json_format: Render JSON lines. Defaults to ``Settings.json_logs``.
        log_file: Also write stdlib records to this file.
    """
    if level is None or json_format is None:
        from dnd_chargen.core.config import get_settings

        settings = get_settings()
        level = level or settings.log_level
        json_format = settings.json_logs if json_format is None else json_format

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_package,
            structlog.processors.format_exc_info,
            _renderer(json_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(format=LOG_FORMAT, level=numeric_level, handlers=handlers, force=True)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Logger for ``name``, usually the calling module's ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach key-value pairs to every following log entry in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


@contextmanager
def character_context(name: str) -> Iterator[None]:
    """Tag log entries emitted inside the block with ``character``."""
    with structlog.contextvars.bound_contextvars(character=name or "<unnamed>"):
        yield


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "character_context",
]
