"""Checklist notification dispatcher.

Maps a checklist event to the chat channels configured for its kind and
fires one detached webhook delivery per channel.

Dispatch never waits for deliveries and never reports their outcome to the
caller: the triggering action (checking an item) must not get slower or
fail because a chat webhook is slow or broken. Deliveries are best effort,
at most once, unordered, and not deduplicated.

Usage:
    from infrastructure.notifications import BackgroundExecutor
    from modules.checklist.notifications import CheckAdded, NotificationDispatcher

    dispatcher = NotificationDispatcher(BackgroundExecutor("notifications"))
    dispatcher.dispatch(
        checklist,
        CheckAdded(checklist=checklist, item=item, user=user),
        url_builder=partial(build_url, "https://checklist.example.com"),
    )
"""

from typing import Callable, List, Optional

from infrastructure.logging import get_module_logger
from infrastructure.notifications import (
    BackgroundExecutor,
    NotificationChannel,
    WebhookChannel,
)
from models.checklist import ChannelConfig, Checklist, NotificationConfig
from modules.checklist.errors import UnknownEventKind
from modules.checklist.notifications.events import (
    EventKind,
    NotificationEvent,
    event_kind,
    render_message,
)
from modules.checklist.urls import UrlBuilder

logger = get_module_logger()

ChannelFactory = Callable[[str, ChannelConfig], NotificationChannel]


class NotificationDispatcher:
    """Fan-out of checklist events to configured webhook channels.

    Attributes:
        executor: Runs each delivery as a detached task
        channel_factory: Builds the channel for a configured name/descriptor
        timeout_seconds: POST timeout for default webhook channels
    """

    def __init__(
        self,
        executor: BackgroundExecutor,
        channel_factory: Optional[ChannelFactory] = None,
        timeout_seconds: float = 10.0,
    ):
        self.executor = executor
        self.timeout_seconds = timeout_seconds
        self.channel_factory = channel_factory or self._webhook_channel

    def dispatch(
        self,
        checklist: Checklist,
        event: NotificationEvent,
        url_builder: UrlBuilder,
    ) -> None:
        """Launch deliveries of event to every channel configured for its kind.

        Returns once every delivery has been submitted. A checklist without
        configuration and channel names missing from the channel map are
        silently skipped.

        Args:
            checklist: Checklist whose configuration selects the channels
            event: The event to announce
            url_builder: Turns the checklist path into an absolute URL

        Raises:
            UnknownEventKind: If event is not a known notification event.
        """
        config = checklist.config
        if config is None:
            return

        kind = event_kind(event)
        channel_names = self._channel_names(config.notification, kind)
        if not channel_names:
            return

        # Rendered once, before any delivery starts, so later changes to the
        # checklist cannot leak into messages already dispatched.
        message = render_message(event, url_builder)

        launched = 0
        for name in channel_names:
            channel_config = config.notification.channels.get(name)
            if channel_config is None:
                # Treated as a removed or renamed channel
                logger.debug(
                    "notification_channel_not_configured",
                    channel=name,
                    event_kind=kind.value,
                    checklist=str(checklist),
                )
                continue

            channel = self.channel_factory(name, channel_config)
            if self.executor.submit(self._deliver, channel, message, kind):
                launched += 1

        logger.info(
            "notification_dispatched",
            checklist=str(checklist),
            event_kind=kind.value,
            channel_count=launched,
        )

    @staticmethod
    def _channel_names(notification: NotificationConfig, kind: EventKind) -> List[str]:
        match kind:
            case EventKind.ON_CHECK:
                return notification.events.on_check
            case EventKind.ON_COMPLETE:
                return notification.events.on_complete
        raise UnknownEventKind(kind)

    def _webhook_channel(self, name: str, config: ChannelConfig) -> NotificationChannel:
        return WebhookChannel(
            name=name, url=config.url, timeout_seconds=self.timeout_seconds
        )

    def _deliver(
        self, channel: NotificationChannel, message: str, kind: EventKind
    ) -> None:
        """Deliver one message; runs on a worker thread."""
        result = channel.send(message)
        if result.is_success:
            logger.info(
                "notification_delivered",
                channel=channel.channel_name,
                target=channel.target,
                event_kind=kind.value,
            )
            return

        logger.error(
            "notification_delivery_failed",
            channel=channel.channel_name,
            target=channel.target,
            event_kind=kind.value,
            error=result.message,
            error_code=result.error_code,
            status=result.status.value,
        )
