"""structlog setup for the casting engine.

Engine modules log through module-level loggers from ``get_logger`` and
never bind global context; every event carries its own fields (character,
caster type, power name). Applications embedding the engine call
``configure_logging`` once at startup. Without arguments the level and
renderer come from ``Settings`` (``SW5E_MANAGER_LOG_LEVEL``,
``SW5E_MANAGER_JSON_LOGS``, ``SW5E_MANAGER_DEBUG``).

Example:
    >>> configure_logging()
    >>> get_logger(__name__).warning("Power not found", power="Ghost Power")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import structlog

from sw5e_manager.core.config import Settings, get_settings


if TYPE_CHECKING:
    from structlog.types import EventDict, Processor, WrappedLogger


APP_NAME = "sw5e_manager"


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag an event with the application name."""
    event_dict["app"] = APP_NAME
    return event_dict


def resolve_log_level(settings: Settings) -> int:
    """Numeric log level for the settings; debug mode forces DEBUG."""
    if settings.debug:
        return logging.DEBUG
    return logging.getLevelName(settings.log_level)


def build_processors(*, json_format: bool) -> list[Processor]:
    """Processor chain ending in a JSON or console renderer."""
    processors: list[Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def configure_logging(
    settings: Settings | None = None,
    *,
    level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """Configure structlog for the process.

    Args:
        settings: Settings to read ``log_level``, ``json_logs`` and
            ``debug`` from; defaults to ``get_settings()``.
        level: Explicit level name, overriding the settings.
        json_format: Explicit renderer choice, overriding the settings.

    Raises:
        ConfigurationError: If the settings cannot be loaded.
    """
    settings = settings or get_settings()
    numeric_level = (
        logging.getLevelName(level.upper()) if level is not None else resolve_log_level(settings)
    )
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    use_json = settings.json_logs if json_format is None else json_format

    structlog.configure(
        processors=build_processors(json_format=use_json),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, usually for ``__name__``."""
    return structlog.get_logger(name)


__all__ = [
    "add_app_context",
    "build_processors",
    "configure_logging",
    "get_logger",
    "resolve_log_level",
]
