"""Notification channel abstract base class."""

from abc import ABC, abstractmethod

from infrastructure.operations import OperationResult


class NotificationChannel(ABC):
    """A named destination that accepts rendered message text.

    Implementations must report failures through the returned
    OperationResult rather than raising, since they run on detached
    workers where nobody is waiting for an exception.
    """

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Configured channel name, used for logging."""

    @property
    @abstractmethod
    def target(self) -> str:
        """Loggable description of where messages go (never a secret)."""

    @abstractmethod
    def send(self, message: str) -> OperationResult:
        """Deliver one message.

        Args:
            message: Rendered message text

        Returns:
            OperationResult: SUCCESS, or an error with error_code set
        """
