"""Unit tests for WebhookChannel."""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from infrastructure.notifications.channels.webhook import (
    DELIVERY_FAILURE,
    SERIALIZATION_FAILURE,
    WebhookChannel,
)
from infrastructure.operations import OperationStatus

WEBHOOK_URL = "https://hooks.example.com/services/T000/B000/secret"


def make_response(status_code, text="ok", headers=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.text = text
    response.headers = headers or {}
    return response


@pytest.mark.unit
class TestWebhookChannelSend:
    @patch("infrastructure.notifications.channels.webhook.requests.post")
    def test_posts_form_encoded_payload(self, mock_post):
        mock_post.return_value = make_response(200)
        channel = WebhookChannel("default", WEBHOOK_URL, timeout_seconds=7)

        result = channel.send('#5 "Fix bug" checked by alice')

        assert result.is_success
        assert result.data == {"status_code": 200}
        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        assert args == (WEBHOOK_URL,)
        assert kwargs["timeout"] == 7
        assert set(kwargs["data"]) == {"payload"}
        assert json.loads(kwargs["data"]["payload"]) == {
            "text": '#5 "Fix bug" checked by alice'
        }

    @patch("infrastructure.notifications.channels.webhook.requests.post")
    def test_any_2xx_is_success(self, mock_post):
        mock_post.return_value = make_response(204, text="")

        result = WebhookChannel("default", WEBHOOK_URL).send("hi")

        assert result.is_success

    @pytest.mark.parametrize(
        "status_code,expected",
        [
            (403, OperationStatus.PERMANENT_ERROR),
            (404, OperationStatus.NOT_FOUND),
            (500, OperationStatus.TRANSIENT_ERROR),
            (302, OperationStatus.PERMANENT_ERROR),
        ],
    )
    @patch("infrastructure.notifications.channels.webhook.requests.post")
    def test_non_2xx_is_delivery_failure(self, mock_post, status_code, expected):
        mock_post.return_value = make_response(status_code, text="no_service")

        result = WebhookChannel("default", WEBHOOK_URL).send("hi")

        assert not result.is_success
        assert result.status == expected
        assert result.error_code == DELIVERY_FAILURE
        assert "no_service" in result.message

    @patch("infrastructure.notifications.channels.webhook.requests.post")
    def test_transport_error_is_delivery_failure(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("connection refused")

        result = WebhookChannel("default", WEBHOOK_URL).send("hi")

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == DELIVERY_FAILURE
        assert "connection refused" in result.message

    @patch("infrastructure.notifications.channels.webhook.requests.post")
    def test_timeout_is_transient(self, mock_post):
        mock_post.side_effect = requests.Timeout("read timed out")

        result = WebhookChannel("default", WEBHOOK_URL).send("hi")

        assert result.status == OperationStatus.TRANSIENT_ERROR

    @patch("infrastructure.notifications.channels.webhook.requests.post")
    def test_invalid_url_is_permanent(self, mock_post):
        mock_post.side_effect = requests.exceptions.InvalidURL("bad url")

        result = WebhookChannel("default", "not a url").send("hi")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == DELIVERY_FAILURE

    @patch("infrastructure.notifications.channels.webhook.requests.post")
    def test_serialization_failure_skips_post(self, mock_post):
        with patch(
            "infrastructure.notifications.channels.webhook.WebhookPayload.to_form",
            side_effect=ValueError("surrogates not allowed"),
        ):
            result = WebhookChannel("default", WEBHOOK_URL).send("hi")

        mock_post.assert_not_called()
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == SERIALIZATION_FAILURE

    def test_uses_session_when_given(self):
        session = MagicMock()
        session.post.return_value = make_response(200)

        result = WebhookChannel("default", WEBHOOK_URL, session=session).send("hi")

        assert result.is_success
        session.post.assert_called_once()


@pytest.mark.unit
class TestWebhookChannelTarget:
    def test_target_hides_secret_path(self):
        channel = WebhookChannel("default", WEBHOOK_URL)

        assert channel.target == "https://hooks.example.com"
        assert "secret" not in channel.target

    def test_target_for_invalid_url(self):
        assert WebhookChannel("default", "garbage").target == "<invalid url>"

    def test_channel_name(self):
        assert WebhookChannel("ops", WEBHOOK_URL).channel_name == "ops"
