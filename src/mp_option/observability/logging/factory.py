"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from mp_option.config.settings import LoggingSettings


class JsonLoggerFactory:
    """Configure structlog to render through the stdlib root logger."""

    @staticmethod
    def configure(
        level: int | str = logging.INFO,
        *,
        json_output: bool = True,
        settings: LoggingSettings | None = None,
        cache_logger_on_first_use: bool = True,
    ) -> None:
        """Install structlog processors and a single root handler.

        ``settings`` (when given) overrides ``level`` and ``json_output``.
        An unknown level name raises ``InvalidSettingValueError`` before any
        global logging state is touched.
        """
        if settings is not None:
            level = settings.level
            json_output = settings.json
        if isinstance(level, str):
            from mp_option.config.settings import LoggingSettings

            level = logging.getLevelName(LoggingSettings(level=level).level)

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=cache_logger_on_first_use,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
