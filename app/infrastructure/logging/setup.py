"""Structlog configuration and module loggers.

Development renders colourised console lines, production renders one JSON
object per line. Under pytest everything is silenced.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("check_added", checklist="o/r#1", item=5)
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import EventDict, Processor, WrappedLogger

from infrastructure.configuration import Settings


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _deployment_context(git_sha: str) -> Processor:
    """Processor stamping every entry with the deployed commit."""

    def processor(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("git_sha", git_sha)
        return event_dict

    return processor


def _build_processors(settings: Settings, prod_mode: bool) -> List[Processor]:
    processors: List[Processor] = [
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
    if prod_mode:
        processors.append(_deployment_context(settings.GIT_SHA))
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _configure_silent() -> BoundLogger:
    # Loggers stay usable; the root level drops every record
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=logging.CRITICAL + 1, force=True)
    logging.root.setLevel(logging.CRITICAL + 1)
    return structlog.stdlib.get_logger()


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Settings to read LOG_LEVEL, PREFIX and GIT_SHA from.
            Defaults to Settings() loaded from the environment.
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production (JSON vs console).

    Returns:
        The root structlog logger.
    """
    if _is_test_environment():
        return _configure_silent()

    if settings is None:
        settings = Settings()
    prod_mode = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=_build_processors(settings, prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s", level=getattr(logging, level_name, logging.INFO)
    )

    return structlog.stdlib.get_logger()


# Configured on import so module-level loggers bind to a configured structlog
logger: BoundLogger = configure_logging()


def get_module_logger(**initial_context: Any) -> BoundLogger:
    """Logger bound to the calling module.

    Adds "component" (last dotted segment) and "module_path" to every entry,
    plus any extra initial context.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown", **initial_context)

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
        **initial_context,
    )
