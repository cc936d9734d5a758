"""Structlog loggers for phrasebook modules.

Importing phrasebook leaves logging configuration alone. Module loggers are
lazy structlog proxies, so they follow whatever the host application sets
up, even when it configures structlog after importing phrasebook.
Applications without their own setup call configure_logging() once at
startup.

Usage:
    from phrasebook.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.typing import BindableLogger, Processor

from phrasebook.configuration import settings

PACKAGE_LOGGER = "phrasebook"
SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _renderer(is_production: bool) -> Processor:
    if is_production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> None:
    """Route structlog events through the standard library logging module.

    Renders to the console in development and to JSON lines in production.
    Under pytest every phrasebook event is dropped before rendering.

    Args:
        log_level: Level name for phrasebook loggers (default: LOG_LEVEL).
        is_production: JSON output when True (default: settings.is_production).
    """
    if _is_test_environment():
        level = SILENT
        renderer: Processor = structlog.processors.KeyValueRenderer()
    else:
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)
        prod_mode = settings.is_production if is_production is None else is_production
        renderer = _renderer(prod_mode)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            ),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def get_module_logger() -> BindableLogger:
    """Get a lazy logger for the calling module.

    Binds ``component`` (last dotted segment) and ``module_path``.

    Example:
        # In phrasebook/i18n/translator.py
        logger = get_module_logger()
        # context: {"component": "translator", "module_path": "phrasebook.i18n.translator"}
    """
    current_frame = inspect.currentframe()
    caller = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None

    if module is None:
        return structlog.get_logger(component="unknown")

    module_path = module.__name__
    return structlog.get_logger(
        component=module_path.rsplit(".", 1)[-1],
        module_path=module_path,
    )
