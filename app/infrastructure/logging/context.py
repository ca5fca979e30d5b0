"""Request-scoped logging context.

Values bound here are merged into every log entry emitted while a request is
handled. Webhook deliveries started by the request inherit them too, since
the background executor runs each task in a copy of the submitter's context.
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Iterator

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    user_login: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Iterator[None]:
    """Bind request context for the duration of the block.

    Args:
        correlation_id: Request id; a UUID4 is generated when missing.
        user_login: GitHub login of the acting user.
        request_path: e.g. "/api/check".
        request_method: e.g. "PUT".
        **extra_context: Any other key-value pairs to log.

    Example:
        with bind_request_context(correlation_id="req-123", user_login="alice"):
            logger.info("check_added")
    """
    optional = {
        "user_login": user_login,
        "request_path": request_path,
        "request_method": request_method,
    }
    context = {"correlation_id": correlation_id or str(uuid.uuid4())}
    context.update({key: value for key, value in optional.items() if value is not None})
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context)


def get_correlation_id() -> Optional[str]:
    """Correlation id bound to the current context, if any."""
    return structlog.contextvars.get_contextvars().get("correlation_id")
