"""Notification channel implementations."""

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.channels.webhook import WebhookChannel

__all__ = ["NotificationChannel", "WebhookChannel"]
