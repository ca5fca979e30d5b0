"""Outbound notification payload models."""

from typing import Dict

from pydantic import BaseModel


class WebhookPayload(BaseModel):
    """Message body of a chat incoming webhook.

    Incoming webhooks accept the JSON message either as the request body or
    as a form-encoded "payload" field; deliveries use the form variant.
    """

    text: str

    def to_form(self) -> Dict[str, str]:
        """Form fields for an application/x-www-form-urlencoded POST.

        Raises:
            pydantic_core.PydanticSerializationError: If the text cannot be
                encoded as JSON (e.g. lone surrogates).
        """
        return {"payload": self.model_dump_json()}
