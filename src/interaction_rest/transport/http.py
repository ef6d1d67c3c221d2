"""
REST HTTP client for the Discord API.
"""

import logging
from typing import Any, Optional

import httpx

from interaction_rest.errors import HTTPError
from interaction_rest.transport.multipart import RequestBody

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://discord.com/api/v10"
USER_AGENT = "DiscordBot (interaction-rest, 0.1.0)"


def mask_token(path: str, token: str) -> str:
    """Replace an interaction token in a path for safe logging."""
    if not token or len(token) <= 12:
        return path.replace(token, "***") if token else path
    return path.replace(token, f"{token[:4]}***{token[-4:]}")


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        bot_token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._bot_token = bot_token
        self._client = httpx.AsyncClient(
            base_url=f"{self._base_url}/",
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_token(self, bot_token: Optional[str]) -> None:
        self._bot_token = bot_token

    def _auth_headers(self) -> dict[str, str]:
        if self._bot_token:
            return {"Authorization": f"Bot {self._bot_token}"}
        return {}

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    @staticmethod
    def _raise_for_status(method: str, log_path: str, resp: httpx.Response) -> None:
        if resp.status_code < 400:
            return
        details: Optional[dict[str, Any]] = None
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            details = body
        logger.warning("%s %s failed with HTTP %d", method, log_path, resp.status_code)
        raise HTTPError(resp.status_code, f"HTTP {resp.status_code}: {resp.text[:200]}", details)

    async def request(self, method: str, path: str, *, log_path: Optional[str] = None) -> Any:
        """Send a request with no body and decode the JSON response."""
        logger.debug("%s %s", method, log_path or path)
        resp = await self._client.request(method, path, headers=self._auth_headers())
        self._raise_for_status(method, log_path or path, resp)
        return self._decode(resp)

    async def send(self, method: str, path: str, body: RequestBody, *, log_path: Optional[str] = None) -> Any:
        """Send a JSON or multipart body and decode the JSON response."""
        logger.debug("%s %s (%s)", method, log_path or path, "multipart" if body.multipart else "json")
        resp = await self._client.request(method, path, headers=self._auth_headers(), **body.httpx_kwargs())
        self._raise_for_status(method, log_path or path, resp)
        return self._decode(resp)

    async def close(self) -> None:
        await self._client.aclose()
