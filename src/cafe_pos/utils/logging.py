"""Настройка логирования (structlog)."""

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """
    Выводит события в формате key=value в stderr.
    События ниже ``level`` отбрасываются.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )

    # SQL_ECHO пишет через стандартный logging
    logging.basicConfig(level=log_level, format="%(message)s")
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
