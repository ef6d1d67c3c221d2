import json
from typing import Any, Callable, Optional

import httpx
import pytest

from interaction_rest.client import AsyncInteractionClient

APP_ID = 111111111111111111
TOKEN = "aW50ZXJhY3Rpb246dG9rZW4tZm9yLXRlc3Rz"

MESSAGE = {
    "id": "222222222222222222",
    "channel_id": "333333333333333333",
    "content": "hello",
    "embeds": [],
    "attachments": [],
}


class Recorder:
    """Collects requests and answers them with a fixed response."""

    def __init__(self, status: int = 200, body: Optional[Any] = None):
        self.status = status
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is None:
            return httpx.Response(self.status)
        return httpx.Response(self.status, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def make_client() -> Callable[[Recorder], AsyncInteractionClient]:
    def _make(recorder: Recorder) -> AsyncInteractionClient:
        return AsyncInteractionClient(application_id=APP_ID, transport=httpx.MockTransport(recorder))
    return _make
