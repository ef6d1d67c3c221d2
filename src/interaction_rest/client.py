"""
AsyncInteractionClient / InteractionClient — main SDK clients.
"""

import asyncio
from typing import Any, Optional

import httpx

from interaction_rest.interactions import InteractionsAPI
from interaction_rest.models.interaction import (
    EditInteractionResponseData,
    InteractionResponse,
    InteractionResponseData,
)
from interaction_rest.models.message import Message
from interaction_rest.transport.http import DEFAULT_BASE_URL, HttpClient


class AsyncInteractionClient:
    """Async interactions client (primary).

    ``bot_token`` is optional: interaction callbacks and webhook messages are
    authorized by the interaction token in the URL.
    """

    def __init__(
        self,
        application_id: Optional[int] = None,
        bot_token: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.application_id = application_id
        self.http = HttpClient(base_url=base_url, bot_token=bot_token, timeout=timeout, transport=transport)
        self.interactions = InteractionsAPI(self.http)

    async def __aenter__(self) -> "AsyncInteractionClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    def _app_id(self, app_id: Optional[int]) -> int:
        resolved = app_id if app_id is not None else self.application_id
        if resolved is None:
            raise ValueError("application_id required: pass app_id or set it on the client")
        return resolved

    async def respond(self, interaction_id: int, token: str, resp: InteractionResponse) -> None:
        await self.interactions.respond(interaction_id, token, resp)

    async def original_response(self, token: str, app_id: Optional[int] = None) -> Message:
        return await self.interactions.original_response(self._app_id(app_id), token)

    async def edit_original_response(
        self, token: str, data: EditInteractionResponseData, app_id: Optional[int] = None,
    ) -> Message:
        return await self.interactions.edit_original_response(self._app_id(app_id), token, data)

    async def delete_original_response(self, token: str, app_id: Optional[int] = None) -> None:
        await self.interactions.delete_original_response(self._app_id(app_id), token)

    async def follow_up(self, token: str, data: InteractionResponseData, app_id: Optional[int] = None) -> Message:
        return await self.interactions.follow_up(self._app_id(app_id), token, data)

    async def edit_follow_up(
        self, token: str, message_id: int, data: EditInteractionResponseData, app_id: Optional[int] = None,
    ) -> Message:
        return await self.interactions.edit_follow_up(self._app_id(app_id), message_id, token, data)

    async def delete_follow_up(self, token: str, message_id: int, app_id: Optional[int] = None) -> None:
        await self.interactions.delete_follow_up(self._app_id(app_id), message_id, token)

    async def close(self) -> None:
        await self.http.close()


class InteractionClient:
    """Sync wrapper around AsyncInteractionClient. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncInteractionClient(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    def __enter__(self) -> "InteractionClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    @property
    def application_id(self) -> Optional[int]:
        return self._async.application_id

    @property
    def interactions(self) -> InteractionsAPI:
        return self._async.interactions

    def respond(self, interaction_id: int, token: str, resp: InteractionResponse) -> None:
        self._run(self._async.respond(interaction_id, token, resp))

    def original_response(self, token: str, app_id: Optional[int] = None) -> Message:
        return self._run(self._async.original_response(token, app_id))

    def edit_original_response(
        self, token: str, data: EditInteractionResponseData, app_id: Optional[int] = None,
    ) -> Message:
        return self._run(self._async.edit_original_response(token, data, app_id))

    def delete_original_response(self, token: str, app_id: Optional[int] = None) -> None:
        self._run(self._async.delete_original_response(token, app_id))

    def follow_up(self, token: str, data: InteractionResponseData, app_id: Optional[int] = None) -> Message:
        return self._run(self._async.follow_up(token, data, app_id))

    def edit_follow_up(
        self, token: str, message_id: int, data: EditInteractionResponseData, app_id: Optional[int] = None,
    ) -> Message:
        return self._run(self._async.edit_follow_up(token, message_id, data, app_id))

    def delete_follow_up(self, token: str, message_id: int, app_id: Optional[int] = None) -> None:
        self._run(self._async.delete_follow_up(token, message_id, app_id))

    def close(self) -> None:
        if self._loop.is_closed():
            return
        self._run(self._async.close())
        self._loop.close()
