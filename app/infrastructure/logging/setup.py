"""Structlog configuration for the alert language engine.

Resolution code logs instead of raising (failed preference sources,
defaulted policy values, gated groups), so every module gets a structlog
logger bound to its own path and renders through one shared pipeline.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("preference_resolved", language="fr-fr", source="browser")
"""

import inspect
import logging
import sys
from types import ModuleType
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import Processor

from infrastructure.configuration import Settings

# Root level that keeps every record below it silent.
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _shared_processors() -> List[Processor]:
    return [
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
    ]


def _configure_silent() -> BoundLogger:
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    logging.root.setLevel(SILENT_LEVEL)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.stdlib.get_logger()


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog over the standard library logging module.

    Production renders one JSON object per event; development uses the
    console renderer. Under pytest nothing is emitted.

    Args:
        settings: Settings to read LOG_LEVEL and PREFIX from. Loaded from the
            settings provider only when an override below is missing.
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: Renderer switch overriding settings.is_production.

    Returns:
        Root structlog logger.
    """
    if _is_test_environment():
        return _configure_silent()

    if settings is None and (log_level is None or is_production is None):
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    if is_production is None:
        is_production = settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if is_production
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[*_shared_processors(), renderer],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module(depth: int = 2) -> Optional[ModuleType]:
    frame = inspect.currentframe()
    for _ in range(depth):
        if frame is None:
            return None
        frame = frame.f_back
    if frame is None:
        return None
    return inspect.getmodule(frame)


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Logger bound with logger_name, the calling module when name is omitted."""
    if name:
        return logger.bind(logger_name=name)
    module = _caller_module()
    return logger.bind(logger_name=module.__name__ if module else "unknown")


def get_module_logger() -> BoundLogger:
    """Logger bound with the calling module's component and module_path.

    Example:
        # In modules/alerts/selection.py
        logger = get_module_logger()
        # context: {"component": "selection", "module_path": "modules.alerts.selection"}
    """
    module = _caller_module()
    if module is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
