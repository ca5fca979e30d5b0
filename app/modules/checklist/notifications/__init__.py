"""Checklist notifications: events and their dispatch to chat webhooks."""

from modules.checklist.notifications.dispatcher import NotificationDispatcher
from modules.checklist.notifications.events import (
    CheckAdded,
    ChecklistCompleted,
    EventKind,
    NotificationEvent,
    event_kind,
    render_message,
)

__all__ = [
    "NotificationDispatcher",
    "CheckAdded",
    "ChecklistCompleted",
    "EventKind",
    "NotificationEvent",
    "event_kind",
    "render_message",
]
