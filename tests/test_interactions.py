"""Dispatcher behaviour against a mocked Discord API."""

import httpx
import pytest

from conftest import APP_ID, MESSAGE, TOKEN, Recorder
from interaction_rest import AsyncInteractionClient, InteractionClient
from interaction_rest.errors import (
    EmbedBudgetExceededError,
    EmptyPayloadError,
    HTTPError,
    MentionPolicyError,
)
from interaction_rest.models import (
    AllowedMentions,
    EditInteractionResponseData,
    Embed,
    File,
    InteractionID,
    InteractionResponse,
    InteractionResponseData,
    InteractionResponseType,
    Message,
    MessageID,
)

BASE = "https://discord.com/api/v10"
ORIGINAL = f"{BASE}/webhooks/{APP_ID}/{TOKEN}/messages/@original"


class TestRespond:
    @pytest.mark.asyncio
    async def test_posts_callback(self, make_client):
        rec = Recorder(204)
        client = make_client(rec)
        resp = InteractionResponse(
            type=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
            data=InteractionResponseData(content="pong"),
        )
        result = await client.respond(InteractionID(444), TOKEN, resp)
        assert result is None
        assert rec.last.method == "POST"
        assert str(rec.last.url) == f"{BASE}/interactions/444/{TOKEN}/callback"
        assert rec.last.headers["content-type"] == "application/json"
        assert rec.last_json() == {"type": 4, "data": {"content": "pong"}}
        assert "authorization" not in rec.last.headers
        await client.close()

    @pytest.mark.asyncio
    async def test_empty_message_never_sent(self, make_client):
        rec = Recorder(204)
        client = make_client(rec)
        resp = InteractionResponse(
            type=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
            data=InteractionResponseData(content=""),
        )
        with pytest.raises(EmptyPayloadError):
            await client.respond(444, TOKEN, resp)
        assert rec.requests == []
        await client.close()

    @pytest.mark.asyncio
    async def test_deferred_without_data(self, make_client):
        rec = Recorder(204)
        client = make_client(rec)
        await client.respond(444, TOKEN, InteractionResponse(type=InteractionResponseType.DEFERRED_UPDATE_MESSAGE))
        assert rec.last_json() == {"type": 6}
        await client.close()

    @pytest.mark.asyncio
    async def test_multipart_with_files(self, make_client):
        rec = Recorder(204)
        client = make_client(rec)
        resp = InteractionResponse(
            type=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
            data=InteractionResponseData(files=[
                File(name="first.txt", reader=b"one"),
                File(name="second.txt", reader=b"two"),
            ]),
        )
        await client.respond(444, TOKEN, resp)
        assert rec.last.headers["content-type"].startswith("multipart/form-data")
        body = rec.last.content
        assert body.index(b'name="payload_json"') < body.index(b'filename="first.txt"')
        assert body.index(b'filename="first.txt"') < body.index(b'filename="second.txt"')
        assert b'{"type": 4, "data": {}}' in body
        await client.close()

    @pytest.mark.asyncio
    async def test_normalized_embeds_sent_and_written_back(self, make_client):
        rec = Recorder(204)
        client = make_client(rec)
        embeds = [Embed(title="hi")]
        resp = InteractionResponse(
            type=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
            data=InteractionResponseData(embeds=embeds),
        )
        await client.respond(444, TOKEN, resp)
        assert embeds[0].type == "rich"
        assert rec.last_json()["data"]["embeds"] == [{"title": "hi", "type": "rich", "color": 0x303030}]
        await client.close()


class TestOriginalResponse:
    @pytest.mark.asyncio
    async def test_get(self, make_client):
        rec = Recorder(200, MESSAGE)
        client = make_client(rec)
        msg = await client.original_response(TOKEN)
        assert isinstance(msg, Message)
        assert msg.id == MESSAGE["id"]
        assert rec.last.method == "GET"
        assert str(rec.last.url) == ORIGINAL
        await client.close()

    @pytest.mark.asyncio
    async def test_edit_allows_partial_patch(self, make_client):
        rec = Recorder(200, MESSAGE)
        client = make_client(rec)
        msg = await client.edit_original_response(TOKEN, EditInteractionResponseData(content=None, embeds=[]))
        assert msg.content == "hello"
        assert rec.last.method == "PATCH"
        assert str(rec.last.url) == ORIGINAL
        assert rec.last_json() == {"content": None, "embeds": []}
        await client.close()

    @pytest.mark.asyncio
    async def test_edit_rejects_bad_mentions(self, make_client):
        rec = Recorder(200, MESSAGE)
        client = make_client(rec)
        data = EditInteractionResponseData(
            content="x",
            allowed_mentions=AllowedMentions(parse=["users"], users=[1]),
        )
        with pytest.raises(MentionPolicyError):
            await client.edit_original_response(TOKEN, data)
        assert rec.requests == []
        await client.close()

    @pytest.mark.asyncio
    async def test_delete(self, make_client):
        rec = Recorder(204)
        client = make_client(rec)
        assert await client.delete_original_response(TOKEN) is None
        assert rec.last.method == "DELETE"
        assert str(rec.last.url) == ORIGINAL
        await client.close()


class TestFollowUp:
    @pytest.mark.asyncio
    async def test_create(self, make_client):
        rec = Recorder(200, MESSAGE)
        client = make_client(rec)
        msg = await client.follow_up(TOKEN, InteractionResponseData(content="more"))
        assert msg.channel_id == MESSAGE["channel_id"]
        assert rec.last.method == "POST"
        assert str(rec.last.url) == f"{BASE}/webhooks/{APP_ID}/{TOKEN}"
        assert rec.last_json() == {"content": "more"}
        await client.close()

    @pytest.mark.asyncio
    async def test_create_requires_visible_content(self, make_client):
        rec = Recorder(200, MESSAGE)
        client = make_client(rec)
        with pytest.raises(EmptyPayloadError):
            await client.follow_up(TOKEN, InteractionResponseData(content=None, embeds=[]))
        assert rec.requests == []
        await client.close()

    @pytest.mark.asyncio
    async def test_create_embed_budget(self, make_client):
        rec = Recorder(200, MESSAGE)
        client = make_client(rec)
        data = InteractionResponseData(embeds=[Embed(description="a" * 4000), Embed(description="b" * 3000)])
        with pytest.raises(EmbedBudgetExceededError) as exc:
            await client.follow_up(TOKEN, data)
        assert exc.value.index == 1
        assert rec.requests == []
        await client.close()

    @pytest.mark.asyncio
    async def test_edit(self, make_client):
        rec = Recorder(200, MESSAGE)
        client = make_client(rec)
        await client.edit_follow_up(TOKEN, MessageID(555), EditInteractionResponseData(content="edited"))
        assert rec.last.method == "PATCH"
        assert str(rec.last.url) == f"{BASE}/webhooks/{APP_ID}/{TOKEN}/messages/555"
        await client.close()

    @pytest.mark.asyncio
    async def test_edit_without_fields_is_allowed(self, make_client):
        rec = Recorder(200, MESSAGE)
        client = make_client(rec)
        await client.edit_follow_up(TOKEN, 555, EditInteractionResponseData())
        assert rec.last_json() == {}
        await client.close()

    @pytest.mark.asyncio
    async def test_delete(self, make_client):
        rec = Recorder(204)
        client = make_client(rec)
        await client.delete_follow_up(TOKEN, 555)
        assert rec.last.method == "DELETE"
        assert str(rec.last.url) == f"{BASE}/webhooks/{APP_ID}/{TOKEN}/messages/555"
        await client.close()


class TestErrors:
    @pytest.mark.asyncio
    async def test_http_error_keeps_discord_body(self, make_client):
        rec = Recorder(404, {"message": "Unknown Webhook", "code": 10015})
        client = make_client(rec)
        with pytest.raises(HTTPError) as exc:
            await client.original_response(TOKEN)
        assert exc.value.status_code == 404
        assert exc.value.details == {"message": "Unknown Webhook", "code": 10015}
        await client.close()

    @pytest.mark.asyncio
    async def test_missing_app_id(self, make_client):
        client = make_client(Recorder(200, MESSAGE))
        client.application_id = None
        with pytest.raises(ValueError):
            await client.original_response(TOKEN)
        await client.close()

    @pytest.mark.asyncio
    async def test_bot_token_header(self):
        rec = Recorder(200, MESSAGE)
        client = AsyncInteractionClient(application_id=APP_ID, bot_token="abc", transport=httpx.MockTransport(rec))
        await client.original_response(TOKEN)
        assert rec.last.headers["authorization"] == "Bot abc"
        await client.close()


def test_sync_client():
    rec = Recorder(200, MESSAGE)
    with InteractionClient(application_id=APP_ID, transport=httpx.MockTransport(rec)) as client:
        msg = client.follow_up(TOKEN, InteractionResponseData(content="sync"))
        client.delete_follow_up(TOKEN, msg.id)
    assert [r.method for r in rec.requests] == ["POST", "DELETE"]
    assert str(rec.last.url).endswith(f"/messages/{MESSAGE['id']}")


def test_mask_token():
    from interaction_rest.transport.http import mask_token

    path = f"webhooks/1/{TOKEN}/messages/@original"
    masked = mask_token(path, TOKEN)
    assert TOKEN not in masked
    assert masked == f"webhooks/1/{TOKEN[:4]}***{TOKEN[-4:]}/messages/@original"
