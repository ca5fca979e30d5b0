"""Chat incoming-webhook channel."""

from typing import Optional
from urllib.parse import urlsplit

import requests
from pydantic_core import PydanticSerializationError

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import WebhookPayload
from infrastructure.operations import (
    OperationResult,
    classify_http_response,
    classify_request_error,
)

logger = get_module_logger()

SERIALIZATION_FAILURE = "SERIALIZATION_FAILURE"
DELIVERY_FAILURE = "DELIVERY_FAILURE"


class WebhookChannel(NotificationChannel):
    """Posts messages to an incoming webhook URL.

    The request is application/x-www-form-urlencoded with a single field,
    payload, holding the JSON message {"text": ...}. Any non-2xx status or
    transport error is a failed delivery. There is no retry.
    """

    def __init__(
        self,
        name: str,
        url: str,
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self._name = name
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._session = session

    @property
    def channel_name(self) -> str:
        return self._name

    @property
    def target(self) -> str:
        # Webhook paths embed their secret; only the host is logged
        parts = urlsplit(self.url)
        return f"{parts.scheme}://{parts.netloc}" if parts.netloc else "<invalid url>"

    def send(self, message: str) -> OperationResult:
        try:
            form = WebhookPayload(text=message).to_form()
        except (PydanticSerializationError, ValueError) as e:
            return OperationResult.permanent_error(
                message=f"Could not serialize webhook payload: {e}",
                error_code=SERIALIZATION_FAILURE,
            )

        poster = self._session.post if self._session is not None else requests.post
        try:
            response = poster(self.url, data=form, timeout=self.timeout_seconds)
        except requests.RequestException as e:
            return classify_request_error(e, error_code=DELIVERY_FAILURE)

        result = classify_http_response(response, error_code=DELIVERY_FAILURE)
        logger.debug(
            "webhook_posted",
            channel=self.channel_name,
            target=self.target,
            status=result.status.value,
        )
        return result
