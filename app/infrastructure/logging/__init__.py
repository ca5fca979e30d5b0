"""Structured logging for prchecklist (structlog).

Modules get their logger once at import time and log snake_case events with
keyword context:

    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("notification_dispatched", checklist="o/r#1", channel_count=2)

HTTP middleware wraps each request in bind_request_context() so entries carry
the correlation id and acting user.
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_request_context,
    get_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
]
