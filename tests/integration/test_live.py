"""
Integration tests for interaction-rest — against the real Discord API.

Requires environment variables:
  DISCORD_APPLICATION_ID   — application ID that owns the interaction
  DISCORD_INTERACTION_TOKEN — token of an interaction answered within 15 minutes

Run: INTERACTION_REST_INTEGRATION=1 pytest tests/integration/ -v
"""

import os

import pytest

from interaction_rest import AsyncInteractionClient, EditInteractionResponseData, InteractionResponseData

SKIP = not os.environ.get("INTERACTION_REST_INTEGRATION")
APP_ID = os.environ.get("DISCORD_APPLICATION_ID", "0")
TOKEN = os.environ.get("DISCORD_INTERACTION_TOKEN", "")

pytestmark = pytest.mark.skipif(SKIP, reason="INTERACTION_REST_INTEGRATION not set")


def make_client() -> AsyncInteractionClient:
    return AsyncInteractionClient(application_id=int(APP_ID))


class TestFollowUpLifecycle:
    @pytest.mark.asyncio
    async def test_send_edit_delete(self):
        async with make_client() as client:
            msg = await client.follow_up(TOKEN, InteractionResponseData(content="integration follow-up"))
            assert msg.id

            edited = await client.edit_follow_up(TOKEN, msg.id, EditInteractionResponseData(content="edited"))
            assert edited.content == "edited"

            await client.delete_follow_up(TOKEN, msg.id)


class TestOriginalResponse:
    @pytest.mark.asyncio
    async def test_fetch(self):
        async with make_client() as client:
            msg = await client.original_response(TOKEN)
            assert msg.id
