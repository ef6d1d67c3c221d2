"""
Interactions REST API — callback and webhook message endpoints.

Every call validates its payload before the request is built: emptiness,
then allowed mentions, then embeds. Nothing is sent if validation fails.
"""

from __future__ import annotations

from typing import Union

from interaction_rest import validation
from interaction_rest.models.interaction import (
    EditInteractionResponseData,
    InteractionResponse,
    InteractionResponseData,
)
from interaction_rest.models.message import Message
from interaction_rest.models.snowflake import AppID, InteractionID, MessageID
from interaction_rest.transport.http import HttpClient, mask_token
from interaction_rest.transport.multipart import encode_body

IDLike = Union[int, str]


def _id(value: IDLike) -> str:
    return str(value)


class InteractionsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    @staticmethod
    def callback_path(interaction_id: IDLike, token: str) -> str:
        return f"interactions/{_id(interaction_id)}/{token}/callback"

    @staticmethod
    def webhook_path(app_id: IDLike, token: str) -> str:
        return f"webhooks/{_id(app_id)}/{token}"

    @classmethod
    def message_path(cls, app_id: IDLike, token: str, message_id: Union[IDLike, None] = None) -> str:
        target = "@original" if message_id is None else _id(message_id)
        return f"{cls.webhook_path(app_id, token)}/messages/{target}"

    async def respond(self, interaction_id: Union[InteractionID, IDLike], token: str, resp: InteractionResponse) -> None:
        """Respond to an incoming interaction (the interaction callback).

        The callback returns no body; fetch the created message with
        original_response().
        """
        if resp.data is not None:
            validation.check_response(resp)
            validation.validate_message(resp.data.allowed_mentions, resp.data.embeds)

        path = self.callback_path(interaction_id, token)
        body = encode_body(resp.to_payload(), resp.files)
        await self._http.send("POST", path, body, log_path=mask_token(path, token))

    async def original_response(self, app_id: Union[AppID, IDLike], token: str) -> Message:
        """Fetch the initial interaction response."""
        path = self.message_path(app_id, token)
        return Message.model_validate(await self._http.request("GET", path, log_path=mask_token(path, token)))

    async def edit_original_response(
        self, app_id: Union[AppID, IDLike], token: str, data: EditInteractionResponseData,
    ) -> Message:
        """Edit the initial interaction response."""
        validation.validate_message(data.allowed_mentions, data.embeds)
        path = self.message_path(app_id, token)
        return await self._send_message("PATCH", path, token, data)

    async def delete_original_response(self, app_id: Union[AppID, IDLike], token: str) -> None:
        """Delete the initial interaction response."""
        path = self.message_path(app_id, token)
        await self._http.request("DELETE", path, log_path=mask_token(path, token))

    async def follow_up(self, app_id: Union[AppID, IDLike], token: str, data: InteractionResponseData) -> Message:
        """Create a follow-up message for an interaction."""
        validation.check_new_message(data.content, data.embeds, data.files)
        validation.validate_message(data.allowed_mentions, data.embeds)
        path = self.webhook_path(app_id, token)
        return await self._send_message("POST", path, token, data)

    async def edit_follow_up(
        self,
        app_id: Union[AppID, IDLike],
        message_id: Union[MessageID, IDLike],
        token: str,
        data: EditInteractionResponseData,
    ) -> Message:
        """Edit a follow-up message."""
        validation.validate_message(data.allowed_mentions, data.embeds)
        path = self.message_path(app_id, token, message_id)
        return await self._send_message("PATCH", path, token, data)

    async def delete_follow_up(
        self, app_id: Union[AppID, IDLike], message_id: Union[MessageID, IDLike], token: str,
    ) -> None:
        """Delete a follow-up message."""
        path = self.message_path(app_id, token, message_id)
        await self._http.request("DELETE", path, log_path=mask_token(path, token))

    async def _send_message(
        self,
        method: str,
        path: str,
        token: str,
        data: Union[InteractionResponseData, EditInteractionResponseData],
    ) -> Message:
        body = encode_body(data.to_payload(), data.files)
        result = await self._http.send(method, path, body, log_path=mask_token(path, token))
        return Message.model_validate(result)
