"""Notification delivery infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class NotificationSettings(InfrastructureSettings):
    """Background webhook delivery configuration.

    Each webhook delivery runs as a detached unit on a shared thread pool.
    The pool size bounds how many deliveries are in flight at once, and
    max_pending bounds how many may wait for a worker before new ones are
    dropped.

    Environment Variables:
        NOTIFICATION_MAX_WORKERS: Worker threads for deliveries (default: 8)
        NOTIFICATION_MAX_PENDING: Queued plus running deliveries allowed
            before new submissions are dropped (default: 256)
        NOTIFICATION_TIMEOUT_SECONDS: Webhook POST timeout (default: 10)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        workers = settings.notifications.max_workers
        ```
    """

    max_workers: int = Field(
        default=8,
        alias="NOTIFICATION_MAX_WORKERS",
        gt=0,
        description="Maximum number of concurrent webhook deliveries",
    )
    max_pending: int = Field(
        default=256,
        alias="NOTIFICATION_MAX_PENDING",
        gt=0,
        description="Maximum number of queued plus running deliveries",
    )
    timeout_seconds: float = Field(
        default=10.0,
        alias="NOTIFICATION_TIMEOUT_SECONDS",
        gt=0,
        description="Timeout for each webhook POST (seconds)",
    )
