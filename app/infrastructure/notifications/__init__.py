"""Outbound notification delivery.

Building blocks for fire-and-forget chat notifications:

- WebhookPayload: the {"text": ...} message body
- NotificationChannel / WebhookChannel: deliver one message to one target
- BackgroundExecutor: bounded pool that runs each delivery detached

Usage:
    from infrastructure.notifications import BackgroundExecutor, WebhookChannel

    executor = BackgroundExecutor("notifications", max_workers=4)
    channel = WebhookChannel(name="ops", url="https://hooks.slack.com/services/...")
    executor.submit(channel.send, "Deploy finished")
"""

from infrastructure.notifications.models import WebhookPayload
from infrastructure.notifications.executor import BackgroundExecutor
from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.channels.webhook import WebhookChannel

__all__ = [
    "WebhookPayload",
    "BackgroundExecutor",
    "NotificationChannel",
    "WebhookChannel",
]
